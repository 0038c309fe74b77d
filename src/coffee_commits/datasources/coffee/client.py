"""API Ninjas commodities endpoint constants.

API docs: https://api-ninjas.com/api/commodityprice
"""

COFFEE_API_URL = "https://api.api-ninjas.com/v1/commodities"
COFFEE_QUERY = {"name": "coffee"}

# Header carrying the API Ninjas key
API_KEY_HEADER = "X-Api-Key"
