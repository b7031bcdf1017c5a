"""API 스키마"""
