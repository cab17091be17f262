"""Docker Dashboard: шлюз запросов к Docker Engine и клиент для просмотра контейнеров."""

__version__ = "0.1.0"
