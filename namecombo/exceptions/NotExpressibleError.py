class NotExpressibleError(Exception):
    def __init__(
        self,
        type="value_error.not_expressible",
        message="This name cannot be expressed in the requested form.",
    ):
        self.type = type
        self.message = message
        super().__init__(self.message)
