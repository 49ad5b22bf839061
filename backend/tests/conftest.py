"""Root conftest - shared test configuration."""

import os

# Ensure tests don't accidentally use a real API key or real upstreams
os.environ.setdefault("API_KEY", "test-fake-key")
os.environ.setdefault("CITY_API_BASE_URL", "http://city.test")
os.environ.setdefault("WEATHER_API_BASE_URL", "http://weather.test")
os.environ.setdefault("LOG_FORMAT", "text")
