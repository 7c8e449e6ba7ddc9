"""
Responsible for all configuration-related things.
"""
import os

# Base URL of the Ore web API
ORE_API_URL = os.environ.get("ORE_API_URL", "https://ore.spongepowered.org/api/v2/")

# Base URL of the human-facing site, used to build project pages
ORE_WEB_URL = os.environ.get("ORE_WEB_URL", "https://ore.spongepowered.org/")

# API key for authenticated sessions. Without one, Ore hands out public sessions.
ORE_API_KEY = os.environ.get("ORE_API_KEY", None)

# Seconds to wait on any single HTTP request
TIMEOUT = float(os.environ.get("ORE_TIMEOUT", 30))

# User Agent to use for making HTTP requests
USER_AGENT = "oreapi/1.0.0 (+https://ore.spongepowered.org/)"
