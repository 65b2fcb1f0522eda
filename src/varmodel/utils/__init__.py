"""Utilities for VarModel"""
