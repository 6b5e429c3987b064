"""Item Engine Core"""
