"""
nativefs Test Suite
"""
