from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Domain entity: a staff or administrator account.

    Note: plain data object, no store access. ``password`` is the plaintext
    shared secret exactly as stored.
    """

    id: str
    name: str
    position: str
    department: str
    password: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_record(cls, row: dict) -> "Account":
        return cls(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            position=str(row.get("position") or ""),
            department=str(row.get("department") or ""),
            password=str(row.get("password") or ""),
            role=Role(row.get("role") or Role.STAFF.value),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "password": self.password,
            "role": self.role.value,
        }
