"""
Core: представление значения, таксономия ошибок и численные алгоритмы.

Не зависит от внешних систем: чистые функции над immutable значениями.
"""
