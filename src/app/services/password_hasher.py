from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way password hashing - application layer"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash"""
        pass
