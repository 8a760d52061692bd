from helpers.config import get_settings, Settings

class BaseService:

    def __init__(self):
        self.app_settings: Settings = get_settings()
