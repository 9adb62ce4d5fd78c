"""
Job application payloads for the Mysolution Apply endpoint.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldValue(BaseModel):
    """A single form field; attachments also carry a file name."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    value: str
    file_name: Optional[str] = Field(None, alias="fileName")


class TrackingParameters(BaseModel):
    """Optional UTM attributes sent at the top level of the payload."""

    model_config = ConfigDict(frozen=True)

    utm_campaign: Optional[str] = None
    utm_medium: Optional[str] = None
    utm_source: Optional[str] = None
    utm_content: Optional[str] = None
    utm_term: Optional[str] = None


class ApplicationPayload(BaseModel):
    """Request body for one application. Immutable once built."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    set_api_name: str = Field(alias="setApiName")
    form_fields: Dict[str, FieldValue] = Field(alias="fields")
    tracking: Optional[TrackingParameters] = None
    status: Optional[str] = None
    is_external_source: Optional[bool] = Field(None, alias="isExternalSource")

    def to_request_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            'setApiName': self.set_api_name,
            'fields': {name: field.model_dump(by_alias=True, exclude_none=True)
                       for name, field in self.form_fields.items()},
        }
        if self.tracking:
            body.update(self.tracking.model_dump(exclude_none=True))
        if self.status is not None:
            body['status'] = self.status
        if self.is_external_source is not None:
            body['isExternalSource'] = self.is_external_source
        return body


@dataclass
class Applicant:
    """Data class representing the person applying."""
    email: str
    first_name: str
    last_name: str
    middle_name: str = ""
    mobile_phone: str = ""
    motivation: str = ""


# Field labels differ per application set
FIELD_NAME_SCHEMES: Dict[str, Dict[str, str]] = {
    'jobbird': {
        'email': 'EMail',
        'first_name': 'FirstName',
        'middle_name': 'MiddleName',
        'last_name': 'LastName',
        'mobile_phone': 'MobilePhone',
        'motivation': 'Motivation',
        'cv': 'CV',
    },
    'default': {
        'email': 'Email',
        'first_name': 'First Name',
        'middle_name': 'Middle Name',
        'last_name': 'Last Name',
        'mobile_phone': 'Mobile',
        'motivation': 'Motivation',
        'cv': 'CV',
    },
}


def field_names_for(set_api_name: str) -> Dict[str, str]:
    return FIELD_NAME_SCHEMES.get(set_api_name, FIELD_NAME_SCHEMES['jobbird'])


def build_payload(applicant: Applicant, cv_base64: str, cv_file_name: str = "testcv.pdf",
                  set_api_name: str = "jobbird",
                  tracking: Optional[TrackingParameters] = None,
                  status: Optional[str] = None,
                  is_external_source: Optional[bool] = None) -> ApplicationPayload:
    """Assemble a fresh payload from applicant details and an encoded CV."""
    names = field_names_for(set_api_name)

    fields: Dict[str, FieldValue] = {}
    for attr in ('email', 'first_name', 'middle_name', 'last_name', 'mobile_phone', 'motivation'):
        value = getattr(applicant, attr)
        if value:
            fields[names[attr]] = FieldValue(value=value)
    fields[names['cv']] = FieldValue(value=cv_base64, file_name=cv_file_name)

    return ApplicationPayload(
        set_api_name=set_api_name,
        form_fields=fields,
        tracking=tracking,
        status=status,
        is_external_source=is_external_source,
    )
