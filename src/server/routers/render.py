"""Render endpoints for the API."""

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from server.models import OutputFormat, RenderErrorResponse, RenderRequest, RenderSuccessResponse
from server.render_processor import process_render
from server.server_config import MAX_INPUT_CHARS

router = APIRouter()

RENDER_RESPONSES = {
    status.HTTP_200_OK: {"model": RenderSuccessResponse, "description": "Rendered output"},
    status.HTTP_400_BAD_REQUEST: {"model": RenderErrorResponse, "description": "Input rejected by the engine"},
}


def _to_json_response(render_request: RenderRequest) -> JSONResponse:
    response = process_render(render_request)
    if isinstance(response, RenderErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    # Only the unused top-level outputs are dropped; nested nulls stay.
    unused = {name for name, value in response if value is None}
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json", exclude=unused))


@router.post("/api/render", responses=RENDER_RESPONSES)
async def api_render(render_request: RenderRequest) -> JSONResponse:
    """Render markup text and return the result.

    **Parameters**

    - **render_request** (`RenderRequest`): Pydantic model containing the text and render options

    **Returns**

    - **JSONResponse**: Success response with the rendered output or error response with HTTP 400

    """
    return _to_json_response(render_request)


@router.get("/api/render", responses=RENDER_RESPONSES)
async def api_render_get(
    text: str = Query(..., max_length=MAX_INPUT_CHARS, description="Markup text to render"),
    output_format: OutputFormat = OutputFormat.HTML,
    header_ids: bool = False,
) -> JSONResponse:
    """Render markup text passed as a query parameter.

    **Query Parameters**
    - **text** (`str`): Markup text to render
    - **output_format** (`str`, optional): ``html``, ``text`` or ``tree``
    - **header_ids** (`bool`, optional): Generate heading anchors

    **Returns**
    - **JSONResponse**: Success response with the rendered output or error response
    """
    render_request = RenderRequest(text=text, output_format=output_format, header_ids=header_ids)
    return _to_json_response(render_request)
