class LanguageNotSupportedError(Exception):
    def __init__(
        self, type="value_error.language", message="This language is not supported."
    ):
        self.type = type
        self.message = message
        super().__init__(self.message)
