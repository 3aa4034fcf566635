# settings.py
# Runtime defaults, overridable through the environment.

import os

OUTPUT_FILE = os.environ.get('KMEANS_OUTPUT', 'output.txt')
# parsed where it is used, so a bad value is reported instead of failing on import
MAX_ITER = os.environ.get('KMEANS_MAX_ITER', '300')
LOG_LEVEL = os.environ.get('KMEANS_LOG_LEVEL', 'WARNING').upper()
