import os

os.environ.setdefault("START_ID", "13000001")
os.environ.setdefault("QUANTITY", "3")
os.environ.setdefault("OUTPUT_PATH", "restaurants.csv")
os.environ.setdefault("BASE_URL", "https://tabelog.com/en/tokyo/A0000/A000000/")
os.environ.setdefault("REQUEST_TIMEOUT", "30")
os.environ.setdefault("IMPERSONATE", "")
