class AuthError(Exception):
    """
    Raised by external collaborators (token verifier, session backend)
    when a credential is rejected. Carries the HTTP status to answer with.
    """

    def __init__(self, message: str, status_code: int = 401):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        return self.message
