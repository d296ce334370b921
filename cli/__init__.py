"""Unified command-line interface for nubemdom.

Usage:
    nubemdom parse <file|->
    nubemdom scan <image> [--user USER]
    nubemdom list [--user USER] [--category CATEGORY]
"""
