class DeserializationError(Exception):
    def __init__(
        self,
        type="value_error.deserialization",
        message="The input does not match the person name schema.",
    ):
        self.type = type
        self.message = message
        super().__init__(self.message)
