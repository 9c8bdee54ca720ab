from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from the_field import settings
from the_field.db_init import ensure_indexes
from the_field.errors import UserServiceError
from the_field.middleware.audit_middleware import AuditMiddleware
from the_field.routes import users

app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

app.add_middleware(AuditMiddleware)

# Routers
app.include_router(users.router)


@app.on_event("startup")
def _startup():
    ensure_indexes()


@app.exception_handler(UserServiceError)
async def user_service_error_handler(request: Request, exc: UserServiceError):
    return JSONResponse(exc.to_payload(), status_code=exc.status_code)


@app.get("/health")
def health():
    return {"status": "ok"}
