DEFAULT_STORAGE_KEY = "rabt_calculation_history"
MAX_RECORDS = 100
DEFAULT_RECENT_COUNT = 10

ID_PREFIX = "calc"
ID_SUFFIX_LENGTH = 9

ONE_WEEK_MS = 7 * 24 * 60 * 60 * 1000
ONE_MONTH_MS = 30 * 24 * 60 * 60 * 1000

APP_DIR_NAME = "calchistory"
