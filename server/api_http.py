# server/api_http.py
import os
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, Form, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
import uvicorn

import config
from client_registry import ClientRegistry, ClientNotFoundError, DuplicateEmailError
from .forms import ClientForm, FIELD_LABELS, validate_form
from .utils.logging_config import setup_logging

logger = setup_logging()

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Messages shown when the registry rejects an email
DUPLICATE_ON_CREATE = "El correo electrónico ya está en uso."
DUPLICATE_ON_UPDATE = "El correo electrónico ya está en uso por otro cliente."


def get_registry(request: Request) -> ClientRegistry:
    return request.app.state.registry


def create_app(registry: Optional[ClientRegistry] = None) -> FastAPI:
    """Build the app around a registry; a seeded one is created if none is given."""
    app = FastAPI(title=config.APP_TITLE)
    app.state.registry = registry if registry is not None else ClientRegistry.with_seed()
    register_views(app)
    register_api(app)
    logger.info(f"App ready with {len(app.state.registry)} clients")
    return app


def _render_form(request: Request, client_id=None, values=None, errors=None, error=None, status_code=200):
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "title": config.APP_TITLE,
            "client_id": client_id,
            "values": values or {"name": "", "email": "", "phone": ""},
            "labels": FIELD_LABELS,
            "errors": errors or {},
            "error": error,
            "phone_length": config.PHONE_LENGTH,
        },
        status_code=status_code,
    )


def _render_not_found(request: Request, client_id: int):
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"title": config.APP_TITLE, "client_id": client_id},
        status_code=404,
    )


def _back_to_list(request: Request):
    return RedirectResponse(request.url_for("client-list"), status_code=303)


def register_views(app: FastAPI):
    @app.get("/", name="client-list")
    def client_list(request: Request, registry: ClientRegistry = Depends(get_registry)):
        return templates.TemplateResponse(
            request,
            "list.html",
            {"title": config.APP_TITLE, "clients": registry.list()},
        )

    @app.get("/new", name="client-new")
    def client_new(request: Request):
        return _render_form(request)

    @app.post("/new")
    def client_new_submit(
        request: Request,
        name: str = Form(""),
        email: str = Form(""),
        phone: str = Form(""),
        registry: ClientRegistry = Depends(get_registry),
    ):
        values = {"name": name, "email": email, "phone": phone}
        form, errors = validate_form(values)
        if form is None:
            return _render_form(request, values=values, errors=errors, status_code=400)
        try:
            registry.create(form.to_draft())
        except DuplicateEmailError:
            return _render_form(request, values=values, error=DUPLICATE_ON_CREATE, status_code=409)
        return _back_to_list(request)

    @app.get("/edit/{client_id}", name="client-edit")
    def client_edit(request: Request, client_id: int, registry: ClientRegistry = Depends(get_registry)):
        client = registry.get_by_id(client_id)
        if client is None:
            return _render_not_found(request, client_id)
        values = {"name": client.name, "email": client.email, "phone": client.phone}
        return _render_form(request, client_id=client_id, values=values)

    @app.post("/edit/{client_id}")
    def client_edit_submit(
        request: Request,
        client_id: int,
        name: str = Form(""),
        email: str = Form(""),
        phone: str = Form(""),
        registry: ClientRegistry = Depends(get_registry),
    ):
        values = {"name": name, "email": email, "phone": phone}
        form, errors = validate_form(values)
        if form is None:
            return _render_form(request, client_id=client_id, values=values, errors=errors, status_code=400)
        try:
            registry.update(form.to_client(client_id))
        except ClientNotFoundError:
            return _render_not_found(request, client_id)
        except DuplicateEmailError:
            return _render_form(request, client_id=client_id, values=values, error=DUPLICATE_ON_UPDATE, status_code=409)
        return _back_to_list(request)

    @app.post("/delete/{client_id}")
    def client_delete(request: Request, client_id: int, registry: ClientRegistry = Depends(get_registry)):
        registry.delete(client_id)
        return _back_to_list(request)


def register_api(app: FastAPI):
    @app.get("/api/clients")
    def api_list_clients(registry: ClientRegistry = Depends(get_registry)):
        return {"clients": [c.to_dict() for c in registry.list()]}

    @app.get("/api/clients/{client_id}")
    def api_get_client(client_id: int, registry: ClientRegistry = Depends(get_registry)):
        client = registry.get_by_id(client_id)
        if client is None:
            raise HTTPException(status_code=404, detail="Client not found")
        return client.to_dict()

    @app.post("/api/clients", status_code=201)
    def api_create_client(form: ClientForm, registry: ClientRegistry = Depends(get_registry)):
        try:
            client = registry.create(form.to_draft())
        except DuplicateEmailError:
            raise HTTPException(status_code=409, detail=DUPLICATE_ON_CREATE)
        return client.to_dict()

    @app.put("/api/clients/{client_id}")
    def api_update_client(client_id: int, form: ClientForm, registry: ClientRegistry = Depends(get_registry)):
        try:
            client = registry.update(form.to_client(client_id))
        except ClientNotFoundError:
            raise HTTPException(status_code=404, detail="Client not found")
        except DuplicateEmailError:
            raise HTTPException(status_code=409, detail=DUPLICATE_ON_UPDATE)
        return client.to_dict()

    @app.delete("/api/clients/{client_id}")
    def api_delete_client(client_id: int, registry: ClientRegistry = Depends(get_registry)):
        deleted = registry.delete(client_id)
        return {"ok": True, "deleted": deleted}


app = create_app()

# Run uvicorn programmatically for convenience if this file executed
def start_server(host=None, port=None):
    uvicorn.run(
        "server.api_http:app",
        host=host or config.HOST,
        port=port or config.PORT,
        reload=False,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    start_server()
