"""
Orders Service: HTTP API заказов и очереди.
"""
