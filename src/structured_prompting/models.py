"""Data models for structured prompting."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CaseInsensitiveModel(BaseModel):
    """
    Base model that binds incoming keys to fields regardless of letter case.

    ``department``, ``Department`` and ``DEPARTMENT`` all populate the same
    field. Unknown keys are ignored. When two keys differ only in case the
    last one wins.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            lookup[name.lower()] = field.alias or name
            if field.alias:
                lookup[field.alias.lower()] = field.alias

        folded: dict[str, Any] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                continue
            target = lookup.get(key.lower())
            if target is not None:
                folded[target] = value
        return folded


# --- Model response ---

CENTS = Decimal("0.01")


def quantize_cents(value: Decimal) -> Decimal:
    """Round to two decimals, midpoints away from zero, at any magnitude."""
    value = Decimal(value)
    with localcontext() as ctx:
        # the default 28-digit context cannot hold cents of very large values
        ctx.prec = max(28, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


class SalaryByDepartment(CaseInsensitiveModel):
    department: str = Field(..., alias="Department", min_length=1, strict=True)
    average_salary: Decimal = Field(..., alias="AverageSalary")

    @field_validator("average_salary", mode="before")
    @classmethod
    def _json_number_only(cls, v: Any) -> Any:
        # bool is an int subclass; strings like "95000" are not JSON numbers
        if isinstance(v, bool) or not isinstance(v, (int, float, Decimal)):
            raise ValueError("AverageSalary must be a JSON number")
        return v

    @field_validator("department")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        # kept verbatim otherwise; names must match the source data exactly
        if not v.strip():
            raise ValueError("Department must not be blank")
        return v


class SalaryByDepartmentResponse(CaseInsensitiveModel):
    items: list[SalaryByDepartment] = Field(default_factory=list, alias="Items")

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, v: Any) -> Any:
        return [] if v is None else v


# --- Employee input records ---


class GeoCoordinates(CaseInsensitiveModel):
    latitude: float = Field(..., alias="Latitude")
    longitude: float = Field(..., alias="Longitude")


class Address(CaseInsensitiveModel):
    street: str = Field(..., alias="Street")
    city: str = Field(..., alias="City")
    state: str = Field(..., alias="State")
    zip_code: str = Field(..., alias="ZipCode")
    country: str = Field(..., alias="Country")
    coordinates: Optional[GeoCoordinates] = Field(None, alias="Coordinates")


class EmergencyContact(CaseInsensitiveModel):
    name: str = Field(..., alias="Name")
    phone: str = Field(..., alias="Phone")
    relationship: str = Field(..., alias="Relationship")


class ContactInfo(CaseInsensitiveModel):
    email: str = Field(..., alias="Email")
    phone: str = Field(..., alias="Phone")
    linked_in: Optional[str] = Field(None, alias="LinkedIn")
    emergency_contact: Optional[EmergencyContact] = Field(None, alias="EmergencyContact")


class Manager(CaseInsensitiveModel):
    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    email: str = Field(..., alias="Email")


class PerformanceReview(CaseInsensitiveModel):
    review_date: datetime = Field(..., alias="ReviewDate")
    rating: int = Field(..., alias="Rating")
    comments: str = Field(..., alias="Comments")
    goals: list[str] = Field(default_factory=list, alias="Goals")


class EmploymentDetails(CaseInsensitiveModel):
    hire_date: datetime = Field(..., alias="HireDate")
    termination_date: Optional[datetime] = Field(None, alias="TerminationDate")
    job_title: str = Field(..., alias="JobTitle")
    employment_type: str = Field(..., alias="EmploymentType")
    manager: Optional[Manager] = Field(None, alias="Manager")
    benefits: list[str] = Field(default_factory=list, alias="Benefits")
    last_review: Optional[PerformanceReview] = Field(None, alias="LastReview")


class Skill(CaseInsensitiveModel):
    name: str = Field(..., alias="Name")
    level: int = Field(..., ge=1, le=10, alias="Level")
    years_experience: int = Field(0, alias="YearsExperience")
    last_used: Optional[datetime] = Field(None, alias="LastUsed")
    certifications: list[str] = Field(default_factory=list, alias="Certifications")


class ProjectMetrics(CaseInsensitiveModel):
    lines_of_code: int = Field(0, alias="LinesOfCode")
    bugs_fixed: int = Field(0, alias="BugsFixed")
    features_delivered: int = Field(0, alias="FeaturesDelivered")
    customer_satisfaction: float = Field(0.0, alias="CustomerSatisfaction")


class Project(CaseInsensitiveModel):
    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    description: str = Field(..., alias="Description")
    start_date: datetime = Field(..., alias="StartDate")
    end_date: Optional[datetime] = Field(None, alias="EndDate")
    status: str = Field(..., alias="Status")
    technologies: list[str] = Field(default_factory=list, alias="Technologies")
    metrics: Optional[ProjectMetrics] = Field(None, alias="Metrics")


class Employee(CaseInsensitiveModel):
    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    department: str = Field(..., alias="Department")
    salary: Decimal = Field(..., alias="Salary")
    address: Address = Field(..., alias="Address")
    contact_info: ContactInfo = Field(..., alias="ContactInfo")
    employment_details: EmploymentDetails = Field(..., alias="EmploymentDetails")
    skills: list[Skill] = Field(default_factory=list, alias="Skills")
    projects: list[Project] = Field(default_factory=list, alias="Projects")
