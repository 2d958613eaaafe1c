"""
Passphrase request/response schemas
Caps and defaults depend on the serving app's settings, applied in the router
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from wordpass.config import Settings
from wordpass.services.assembler import DIGIT_TOKEN, SPECIAL_TOKEN


class PassphraseRequest(BaseModel):
    """Generate one passphrase; min_length overrides count when both are given"""
    count: Optional[int] = Field(default=None, ge=0)
    min_length: Optional[int] = Field(default=None, ge=0)
    separator: Optional[str] = Field(
        default=None,
        min_length=1,
        description='Literal separator, "digit" or "special"',
    )
    seed: Optional[int] = Field(default=None, description="Reproducible output")

    def limit_errors(self, active_settings: Settings) -> List[str]:
        """Problems with this request under the given caps"""
        errors = []

        if self.count is not None and self.count > active_settings.MAX_COUNT:
            errors.append(f"count must be at most {active_settings.MAX_COUNT}")

        if self.min_length is not None and self.min_length > active_settings.MAX_MIN_LENGTH:
            errors.append(f"min_length must be at most {active_settings.MAX_MIN_LENGTH}")

        if (
            self.separator is not None
            and self.separator not in (DIGIT_TOKEN, SPECIAL_TOKEN)
            and len(self.separator) > active_settings.MAX_SEPARATOR_LENGTH
        ):
            errors.append(
                f"separator must be at most {active_settings.MAX_SEPARATOR_LENGTH} characters"
            )

        return errors


class PassphraseResponse(BaseModel):
    """Generated passphrase"""
    passphrase: str
    word_count: int
    length: int
