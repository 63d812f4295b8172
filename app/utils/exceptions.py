class UnknownFieldError(ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown form field: {name}")


class UnknownStrategyError(LookupError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown validation strategy: {name}")


class FormNotFoundError(LookupError):
    def __init__(self, form_id: str):
        self.form_id = form_id
        super().__init__(f"Form not found: {form_id}")
