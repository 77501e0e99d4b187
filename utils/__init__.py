"""工具模块"""
from .formatting import format_number, format_values

__all__ = ['format_number', 'format_values']
