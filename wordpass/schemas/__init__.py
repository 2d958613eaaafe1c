# wordpass Pydantic schemas
from wordpass.schemas.passphrase import PassphraseRequest, PassphraseResponse

__all__ = ["PassphraseRequest", "PassphraseResponse"]
