"""베이스 클래스 ID 및 기본 정책 집합

카탈로그의 NODE 템플릿 ID와 같다. 아이템은 parent 체인으로 이들을 상속한다.
"""

from enum import Enum


class BaseClass(str, Enum):
    ITEM = "54009119af1c881c07000029"

    # 무기
    WEAPON = "5422acb9af1c889c16000029"
    KNIFE = "5447e1d04bdc2dff2f8b4567"
    THROW_WEAPON = "543be6564bdc2df4348b4568"
    MOD = "5448fe124bdc2da5018b4567"
    AMMO = "5485a8684bdc2da71d8b4567"
    AMMO_BOX = "543be5cb4bdc2deb348b4568"

    # 장비
    EQUIPMENT = "543be5f84bdc2dd4348b456a"
    ARMOR = "5448e54d4bdc2dcc718b4568"
    VEST = "5448e5284bdc2dcb718b4567"
    HEADWEAR = "5a341c4086f77401f2541505"
    ARMOR_PLATE = "644120aa86ffbe10ee032b6f"
    BACKPACK = "5448e53e4bdc2d60728b4567"

    # 소모품
    MEDS = "543be5664bdc2dd4348b4569"
    MEDKIT = "5448f39d4bdc2d0a728b4568"
    FOOD_DRINK = "543be6674bdc2df1348b4569"
    FOOD = "5448e8d04bdc2ddf718b4569"
    DRINK = "5448e8d64bdc2dce718b4568"
    FUEL = "5d650c3e815116009f6201d2"
    REPAIR_KITS = "616eb7aea207f41933308f46"

    # 기타
    BARTER_ITEM = "5448eb774bdc2d0a728b4567"
    INFO = "5448ecbe4bdc2d60728b4568"
    KEY = "543be5e94bdc2df1348b4568"
    KEY_MECHANICAL = "5c99f98d86f7745c314214b3"
    KEYCARD = "5c164d2286f774194c5e69fa"
    MONEY = "543be5dd4bdc2deb348b4569"

    # 컨테이너 / 인벤토리 구조물
    STASH = "566abbb64bdc2d144c8b457d"
    INVENTORY = "55d720f24bdc2d88028b456d"
    POCKETS = "557596e64bdc2dc2118b4571"
    LOOT_CONTAINER = "566965d44bdc2d814c8b4571"
    MOB_CONTAINER = "5448bf274bdc2dfc2f8b456a"
    STATIONARY_CONTAINER = "567583764bdc2d98058b456e"
    SORTING_TABLE = "6050cac987d3f925bf016837"


# 일반 거래 대상 베이스 클래스 (is_valid_item 기본 허용 목록)
TRADEABLE_BASE_CLASSES: frozenset[str] = frozenset(
    b.value
    for b in (
        BaseClass.WEAPON,
        BaseClass.KNIFE,
        BaseClass.THROW_WEAPON,
        BaseClass.MOD,
        BaseClass.AMMO,
        BaseClass.AMMO_BOX,
        BaseClass.EQUIPMENT,
        BaseClass.MEDS,
        BaseClass.FOOD_DRINK,
        BaseClass.FUEL,
        BaseClass.REPAIR_KITS,
        BaseClass.BARTER_ITEM,
        BaseClass.INFO,
        BaseClass.KEY,
    )
)

# 내구도 비율을 그대로 쓰는 방어구 계열 (무기는 sqrt 변환)
ARMORED_BASE_CLASSES: frozenset[str] = frozenset(
    b.value
    for b in (
        BaseClass.ARMOR,
        BaseClass.VEST,
        BaseClass.HEADWEAR,
        BaseClass.ARMOR_PLATE,
    )
)
