"""
wger-catalog: async client for the wger exercise API.

Lists exercises, fetches exercise detail and resolves "variation" exercises
sequentially with a fixed pacing delay between requests.
"""

__version__ = "0.1.0"
