"""Process a render request by parsing the markup and serializing the result."""

from __future__ import annotations

from mdlite.exceptions import MdliteError
from mdlite.parser import parse
from mdlite.renderer import serialize_html, serialize_text
from mdlite.utils.logging_config import get_logger
from server.models import OutputFormat, RenderErrorResponse, RenderRequest, RenderResponse, RenderSuccessResponse

# Initialize logger for this module
logger = get_logger(__name__)


def process_render(render_request: RenderRequest) -> RenderResponse:
    """Render the markup in ``render_request`` in the requested format.

    Parameters
    ----------
    render_request : RenderRequest
        Validated request body.

    Returns
    -------
    RenderResponse
        Success response with the rendered output, or an error response if
        the engine rejected the input.

    """
    try:
        document = parse(render_request.text, options=render_request.to_options())
    except MdliteError as exc:
        logger.warning("Failed to render input", extra={"error": str(exc)})
        return RenderErrorResponse(error=str(exc))

    output_format = render_request.output_format
    response = RenderSuccessResponse(output_format=output_format, block_count=len(document.blocks))
    if output_format is OutputFormat.HTML:
        response.html = serialize_html(document)
    elif output_format is OutputFormat.TEXT:
        response.text = serialize_text(document)
    else:
        response.document = document

    logger.info(
        "Rendered input",
        extra={
            "output_format": output_format.value,
            "input_chars": len(render_request.text),
            "block_count": response.block_count,
        },
    )
    return response
