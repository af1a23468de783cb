import os


class Config:
    # Regular source layout: iranid/config -> iranid
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    # Bundled reference data (banks, hometowns)
    DATA_DIR = os.environ.get('IRANID_DATA_DIR') or os.path.join(BASE_DIR, 'data')
    BANKS_DATA_PATH = os.path.join(DATA_DIR, 'banks.json')
    HOMETOWNS_DATA_PATH = os.path.join(DATA_DIR, 'hometowns.json')

    LOG_LEVEL = os.environ.get('IRANID_LOG_LEVEL', 'INFO')

    # Persian names are returned as-is in JSON responses
    JSON_AS_ASCII = False

    DEBUG = False
    TESTING = False


class TestConfig(Config):
    TESTING = True
    LOG_LEVEL = 'DEBUG'
