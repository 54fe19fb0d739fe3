"""Sacavia 客户端辅助工具。"""
