# videocatalog/services/api/errors.py
from __future__ import annotations

from contextlib import contextmanager
from http import HTTPStatus
from typing import Iterator

from fastapi import HTTPException

from videocatalog.domain.errors import NotFoundError, PersistenceError, RecordValidationError


@contextmanager
def domain_errors_as_http() -> Iterator[None]:
    """
    Map catalog errors to HTTP:
      RecordValidationError -> 422 with the rule's message
      NotFoundError         -> 404
      PersistenceError      -> 500, details stay in the log
    """
    try:
        yield
    except RecordValidationError as e:
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=e.message) from e
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e)) from e
    except PersistenceError as e:
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Error processing request") from e
