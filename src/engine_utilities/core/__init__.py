"""
Core numeric kernel and value types.

Этот пакет не зависит от платформенной math-библиотеки для трансцендентных
функций и не содержит состояния: все функции детерминированы.
"""
