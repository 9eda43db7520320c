import os

# Startup pattern, passed to enable() on import when non-empty
pattern = os.getenv('DEBUG', '')
