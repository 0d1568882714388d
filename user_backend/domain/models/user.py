from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    phone: str = ""
    password: Optional[str] = None
    address: str = ""
    image: Optional[str] = None
    is_admin: bool = False

    def validate(self) -> None:
        """Business validations for a new user; stored records are read as-is"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")


@dataclass(frozen=True)
class PendingRegistration:
    """
    Registration data awaiting email verification.

    Never persisted: it only lives as the claims of a signed activation token
    until the token is redeemed or expires.
    """
    name: str
    email: str
    phone: str
    password: str
    address: str
    image: str

    CLAIM_KEYS = ("name", "email", "phone", "password", "address", "image")

    def to_claims(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in self.CLAIM_KEYS}

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "PendingRegistration":
        """Rebuild from decoded token claims; raises ValueError if any claim is missing."""
        missing = [key for key in cls.CLAIM_KEYS if key not in claims]
        if missing:
            raise ValueError(f"Missing claims: {', '.join(missing)}")
        return cls(**{key: claims[key] for key in cls.CLAIM_KEYS})

    def to_user(self, password: Optional[str] = None) -> User:
        user = User(
            id=None,
            name=self.name,
            email=self.email,
            phone=self.phone,
            password=password if password is not None else self.password,
            address=self.address,
            image=self.image,
            is_admin=False,
        )
        user.validate()
        return user


@dataclass
class UploadedImage:
    """Framework-neutral view of an uploaded image file"""
    filename: str
    content_type: str
    content: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)
