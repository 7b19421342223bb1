"""
HTTP-сервисы.
"""
