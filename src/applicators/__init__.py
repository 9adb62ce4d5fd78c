"""
Applicators package for Mysolution job applications.
"""
from .exceptions import MysolutionError, ConfigurationError, TokenAcquisitionError
from .auth import TokenAcquirer
from .encoding import FileEncoder, encode_file_to_base64, PLACEHOLDER_CV_BASE64
from .payload import Applicant, ApplicationPayload, FieldValue, TrackingParameters, build_payload
from .application_submitter import ApplicationSubmitter, error_record, is_error
from .domain_sweep import DomainSweepRunner, SweepOutcome

__all__ = [
    "MysolutionError", "ConfigurationError", "TokenAcquisitionError",
    "TokenAcquirer",
    "FileEncoder", "encode_file_to_base64", "PLACEHOLDER_CV_BASE64",
    "Applicant", "ApplicationPayload", "FieldValue", "TrackingParameters", "build_payload",
    "ApplicationSubmitter", "error_record", "is_error",
    "DomainSweepRunner", "SweepOutcome",
]
