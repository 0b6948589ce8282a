"""
Community Garden Backend — Plot Page Handlers
==============================================

What:  Server-rendered pages to list, create and edit plots.
How:   Each handler calls PlotService and renders a Jinja2 template, or
       redirects back to the list after a save.
Who:   Browsers; every route requires the static admin credentials.

Route Inventory:
    GET  /plots                 → plots/list.html     (context: plots)
    GET  /plots/new             → plots/create.html   (context: plot = empty PlotForm)
    GET  /plots/{plot_id}/edit  → plots/create.html   (context: plot = bound PlotForm)
    POST /plots/save            → 303 redirect to /plots

Error path:
    None handled here. PlotNotFoundError and StoreError reach the global
    handlers in main.py and become ErrorResponse bodies (404 and 500).
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from garden.schemas.common import ErrorResponse
from garden.schemas.plot import STATUS_SUGGESTIONS, PlotForm
from garden.security import require_admin
from garden.services.plot_service import PlotService, get_plot_service

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(
    prefix="/plots",
    tags=["Plots"],
    dependencies=[Depends(require_admin)],
    responses={500: {"model": ErrorResponse, "description": "Plot store unavailable"}},
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "No plot has this id"}}


@router.get("", response_class=HTMLResponse, summary="List all plots")
async def list_plots(
    request: Request,
    service: PlotService = Depends(get_plot_service),
):
    plots = await service.get_all_plots()
    return templates.TemplateResponse(request, "plots/list.html", {"plots": plots})


@router.get("/new", response_class=HTMLResponse, summary="Show the blank plot form")
async def show_create_form(request: Request):
    """Pure: no store access."""
    return templates.TemplateResponse(
        request,
        "plots/create.html",
        {"plot": PlotForm(), "status_suggestions": STATUS_SUGGESTIONS},
    )


@router.get(
    "/{plot_id}/edit",
    response_class=HTMLResponse,
    summary="Show the form for an existing plot",
    responses=NOT_FOUND_RESPONSE,
)
async def show_edit_form(
    plot_id: int,
    request: Request,
    service: PlotService = Depends(get_plot_service),
):
    plot = await service.get_plot(plot_id)
    return templates.TemplateResponse(
        request,
        "plots/create.html",
        {"plot": PlotForm.model_validate(plot), "status_suggestions": STATUS_SUGGESTIONS},
    )


@router.post(
    "/save",
    summary="Create or update a plot from form fields",
    responses=NOT_FOUND_RESPONSE,
)
async def save_plot(
    id: Optional[int] = Form(default=None),
    name: Optional[str] = Form(default=None),
    status_: Optional[str] = Form(default=None, alias="status"),
    size: Optional[str] = Form(default=None),
    location: Optional[str] = Form(default=None),
    service: PlotService = Depends(get_plot_service),
) -> RedirectResponse:
    """
    Bind the form into a PlotForm and save it.

    Field contents are not validated: empty or missing fields are stored as
    NULL. The presence of `id` alone decides between create and update.
    """
    form = PlotForm(id=id, name=name, status=status_, size=size, location=location)
    plot = await service.save_plot(form.to_command())
    logger.debug("Saved plot %s from form", plot.id)

    # 303 See Other: the browser follows with a GET to the list page
    return RedirectResponse(url="/plots", status_code=status.HTTP_303_SEE_OTHER)
