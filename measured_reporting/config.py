import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_REPORTING_INTERVAL_IN_SECONDS = float(os.getenv("MEASURED_DEFAULT_REPORTING_INTERVAL_IN_SECONDS", "10"))
LOG_LEVEL = os.getenv("MEASURED_LOG_LEVEL", "INFO").upper()
