"""批量求值模块"""
from .runner import load_expressions, evaluate_expressions, summarize_results

__all__ = ['load_expressions', 'evaluate_expressions', 'summarize_results']
