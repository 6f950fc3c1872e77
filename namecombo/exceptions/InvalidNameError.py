class InvalidNameError(Exception):
    def __init__(
        self,
        type="value_error.invalid_name",
        message="The name you provided is invalid. At least one given name is required.",
    ):
        self.type = type
        self.message = message
        super().__init__(self.message)
