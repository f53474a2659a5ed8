"""
FastAPI backend: REST API over the in-memory contact store.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import re
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from api.error_handlers import register_error_handlers
from api.settings import Settings
from contactbook.application import (
    ContactDTO,
    ContactNotFound,
    ContactRepository,
    ContactService,
    Duplicate,
    IdMismatch,
    Invalid,
)
from contactbook.domain import Sex
from contactbook.infrastructure import InMemoryContactRepository, seed_repository

settings = Settings.from_env()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.log_level,
)
logger = logging.getLogger(__name__)

CONTACTS_PREFIX = "/api/contacts"
INTEGER_SEGMENT = re.compile(r"-?\d+")


class ContactBody(BaseModel):
    """Contact as sent and received over HTTP (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = 0
    first_name: str
    last_name: str
    emails: list[str] = []
    age: int
    sex: Sex

    @field_validator("sex", mode="before")
    @classmethod
    def sex_from_ordinal(cls, v):
        """Accept enum ordinals (0 = Male, 1 = Female) as well as names."""
        if isinstance(v, int) and not isinstance(v, bool):
            members = list(Sex)
            if 0 <= v < len(members):
                return members[v]
            raise ValueError(f"Unknown sex ordinal {v}")
        return v


def _body_to_dto(body: ContactBody) -> ContactDTO:
    return ContactDTO(
        id=body.id,
        first_name=body.first_name,
        last_name=body.last_name,
        sex=body.sex,
        age=body.age,
        emails=list(body.emails),
    )


def _dto_to_body(dto: ContactDTO) -> ContactBody:
    return ContactBody(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        sex=dto.sex,
        age=dto.age,
        emails=list(dto.emails),
    )


def _not_found(contact_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Contact {contact_id} not found",
    )


def get_service(request: Request) -> ContactService:
    return ContactService(request.app.state.repository)


# --- REST: contacts ---

contacts_router = APIRouter(prefix=CONTACTS_PREFIX, tags=["contacts"])


@contacts_router.get("", response_model=list[ContactBody])
def list_contacts(service: ContactService = Depends(get_service)):
    return [_dto_to_body(dto) for dto in service.list_contacts()]


@contacts_router.get("/filter/{field}/{value}", response_model=list[ContactBody])
def filter_contacts(
    field: str,
    value: str,
    service: ContactService = Depends(get_service),
):
    return [_dto_to_body(dto) for dto in service.filter_contacts(field, value)]


@contacts_router.get("/{contact_id}", response_model=ContactBody)
def get_contact(contact_id: int, service: ContactService = Depends(get_service)):
    result = service.get_contact(contact_id)
    if isinstance(result, ContactNotFound):
        raise _not_found(contact_id)
    return _dto_to_body(result)


@contacts_router.post("", status_code=status.HTTP_201_CREATED)
def create_contact(body: ContactBody, service: ContactService = Depends(get_service)):
    result = service.create_contact(_body_to_dto(body))
    if isinstance(result, Invalid):
        raise HTTPException(status_code=400, detail=result.reason)
    if isinstance(result, Duplicate):
        raise HTTPException(
            status_code=409, detail=f"Contact {result.contact_id} already exists"
        )
    return JSONResponse(
        content=_dto_to_body(result).model_dump(by_alias=True, mode="json"),
        status_code=201,
        headers={"Location": f"{CONTACTS_PREFIX}/{result.id}"},
    )


@contacts_router.put("/{contact_id}", response_model=ContactBody)
def update_contact(
    contact_id: int,
    body: ContactBody,
    service: ContactService = Depends(get_service),
):
    result = service.update_contact(contact_id, _body_to_dto(body))
    if isinstance(result, IdMismatch):
        raise HTTPException(
            status_code=400,
            detail=f"Path id {result.path_id} does not match body id {result.body_id}",
        )
    if isinstance(result, Invalid):
        raise HTTPException(status_code=400, detail=result.reason)
    if isinstance(result, ContactNotFound):
        raise _not_found(contact_id)
    return _dto_to_body(result)


@contacts_router.delete("/{contact_id}")
def delete_contact(contact_id: int, service: ContactService = Depends(get_service)):
    result = service.delete_contact(contact_id)
    if isinstance(result, ContactNotFound):
        raise _not_found(contact_id)
    return Response(status_code=status.HTTP_200_OK)


# --- REST: health and greetings ---

misc_router = APIRouter()


@misc_router.get("/health")
def health():
    return {"status": "ok"}


@misc_router.get("/", response_class=PlainTextResponse)
def hello():
    return "Hello World!"


# Registered after the contacts routes so /api/contacts is matched first.
# Only integer ids belong to this route; anything else is an unknown path.
@misc_router.get("/{item_id}/{name}", response_class=PlainTextResponse)
def hello_name(item_id: str, name: str):
    if not INTEGER_SEGMENT.fullmatch(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return f"Hello {name} with id {int(item_id)}"


def create_app(
    app_settings: Settings | None = None,
    repository: ContactRepository | None = None,
) -> FastAPI:
    """Build the app around one repository that lives as long as the process.
    In development the interactive docs are served at /swagger and, when no
    repository is passed in, the store is filled from the seed file.
    """
    app_settings = app_settings or settings
    dev = app_settings.is_development
    app = FastAPI(
        title="Contactbook API",
        docs_url="/swagger" if dev else None,
        redoc_url=None,
        openapi_url="/openapi.json" if dev else None,
    )
    if repository is None:
        repository = InMemoryContactRepository()
        if dev:
            seed_repository(repository, app_settings.seed_path)
    app.state.repository = repository
    app.state.settings = app_settings

    # Middleware added later wraps earlier middleware: CORS must stay outermost
    # so error responses carry its headers too.
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["content-type"],
    )
    app.include_router(contacts_router)
    app.include_router(misc_router)
    logger.info("Contactbook API ready (environment=%s)", app_settings.environment)
    return app


app = create_app()
