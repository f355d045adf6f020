"""
Centralized constants for GymAI Plan Export.
"""

# ===========================================
# EXPORT
# ===========================================
DEFAULT_TITLE = 'Plan GymAI'          # title used by the plan export endpoint
DEFAULT_FILENAME = 'plan-gymai.pdf'   # attachment name for exported plans
OUTPUT_DIR = 'data/output'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = ''                         # set GYMAI_LOG_FILE to log to disk (CLI only)
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
