"""
Example configuration file for the VIER catalog
Copy this file to config.py and fill in your actual values
(or generate it with: python3 utils/config_generator.py)
"""

# === Site Configuration ===
BASE_URL = 'https://www.vier.be'
API_BASE_URL = 'https://api.viervijfzes.be'
CATEGORIES_URL = 'https://www.vier.be/api/categories'
SEARCH_SITE = 'vier'  # Site scope sent with every search request

# === Request Configuration ===
REQUEST_TIMEOUT = 30  # Seconds per upstream request

# === Authentication ===
# Access token obtained from the identity provider (optional).
# Only the /video/{uuid} endpoint sends it.
ACCESS_TOKEN = ''

# === Logging Configuration ===
LOG_LEVEL = 'INFO'  # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FILE = 'logs/vier_catalog.log'
