from .new import New
from .usecase import ContactUseCase
from .helpers import build_email_job, parse_contact_form

__all__ = ["New", "ContactUseCase", "build_email_job", "parse_contact_form"]
