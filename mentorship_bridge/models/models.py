from pydantic import BaseModel, field_validator
from typing import Optional, List, Dict, Any, Union
from enum import Enum


class UserRole(str, Enum):
    MENTEE = "mentee"
    MENTOR = "mentor"


class RequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class Perspective(str, Enum):
    MENTEE = "mentee"
    MENTOR = "mentor"


def _blank_to_none(v):
    # Empty strings and empty lists are stored as NULL
    if v == "" or v == []:
        return None
    return v


# User Models
class UserUpsert(BaseModel):
    email: str
    name: Optional[str] = None
    role: UserRole = UserRole.MENTEE

    @field_validator('name', mode='before')
    @classmethod
    def empty_name(cls, v):
        return _blank_to_none(v)

    @field_validator('role', mode='before')
    @classmethod
    def default_role(cls, v):
        return v or UserRole.MENTEE

    def to_row(self) -> Dict[str, Any]:
        return {"email": self.email, "name": self.name, "role": self.role.value}


# Mentor Profile Models
class MentorProfileUpsert(BaseModel):
    user_email: str
    timezone: Optional[str] = None
    availability: Optional[List[str]] = None
    types: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    topics: Optional[List[str]] = None
    bio: Optional[str] = None
    meeting_link: Optional[str] = None
    linkedin: Optional[str] = None

    @field_validator(
        'timezone', 'availability', 'types', 'skills', 'topics', 'bio', 'meeting_link', 'linkedin',
        mode='before',
    )
    @classmethod
    def empty_as_null(cls, v):
        return _blank_to_none(v)

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump()


# Mentorship Request Models
class RequestCreate(BaseModel):
    mentee_email: str
    mentor_email: str
    note: Optional[str] = None
    interests: Optional[Union[str, List[str]]] = None

    @field_validator('note', 'interests', mode='before')
    @classmethod
    def empty_as_null(cls, v):
        return _blank_to_none(v)

    def to_row(self) -> Dict[str, Any]:
        return {
            "mentee_email": self.mentee_email,
            "mentor_email": self.mentor_email,
            "status": RequestStatus.PENDING.value,
            "note": self.note,
            "interests": self.interests,
        }


# Goal Models
class GoalCreate(BaseModel):
    mentee_email: str
    title: str
    mentor_email: Optional[str] = None
    notes: Optional[str] = None
    status: str = "open"
    progress: Union[int, float] = 0
    start_date: Optional[str] = None
    due_date: Optional[str] = None

    @field_validator('mentor_email', 'notes', 'start_date', 'due_date', mode='before')
    @classmethod
    def empty_as_null(cls, v):
        return _blank_to_none(v)

    @field_validator('status', mode='before')
    @classmethod
    def default_status(cls, v):
        return v or "open"

    @field_validator('progress', mode='before')
    @classmethod
    def numeric_progress(cls, v):
        # Anything that is not a real number falls back to 0
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return 0
        return v

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump()


# Admin Projections
class MentorJoinedRecord(BaseModel):
    user_email: str
    name: str = ""
    timezone: str = ""
    availability: str = ""
    types: str = ""
    skills: str = ""
    topics: str = ""
    linkedin: str = ""
    meeting_link: str = ""
    created_at: str = ""


class MenteeSummary(BaseModel):
    email: str
    name: str = ""
    created_at: Optional[str] = None
