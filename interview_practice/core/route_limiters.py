"""
Description:
This module sets up a rate limiter for the application using SlowAPI.
It initializes a Limiter instance with a key function to identify clients by their IP address.
The application factory switches it on or off from the RATE_LIMIT_ENABLED setting.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For utility functions like get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger

limiter = Limiter(key_func=get_remote_address)
logger.info("Rate limiter initialized")
