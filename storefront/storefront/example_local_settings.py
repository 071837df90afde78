# Copy to local_settings.py and adjust; settings.py imports it last.

SECRET_KEY = ''

DEBUG = True

ALLOWED_HOSTS = ['*']

CORS_ALLOW_ALL_ORIGINS = True

# For production use PostgreSQL:
# DATABASES = {
#     'default': {
#         'ENGINE': 'django.db.backends.postgresql',
#         'NAME': '',
#         'USER': '',
#         'PASSWORD': '',
#         'HOST': 'localhost',
#         'PORT': '5432',
#     },
# }

# For production use Redis:
# CACHES = {
#     'default': {
#         'BACKEND': 'django.core.cache.backends.redis.RedisCache',
#         'LOCATION': 'redis://127.0.0.1:6379/1',
#     }
# }

# Catalog import source and facet cache lifetime
STOREFRONT_PRODUCT_IMPORT_URL = 'https://dummyjson.com/products'
STOREFRONT_FACETS_CACHE_TTL = 3600

ENVIRONMENT = "Local"
