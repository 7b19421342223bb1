"""
Orders API.
Сервис заказов (Pedido) с in-memory очередью на обработку.
"""

__version__ = "1.0.0"
