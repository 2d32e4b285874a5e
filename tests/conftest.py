import os

# Keep test runs from writing dated log files.
os.environ.setdefault("JOBFIT_LOG_FILE", "0")
