"""Acting identity as resolved by the auth provider"""

from sqlmodel import SQLModel


class ActingIdentity(SQLModel):
    """Who is performing an operation; guests are subject to the quota gate"""

    account_id: str
    is_guest: bool = False
