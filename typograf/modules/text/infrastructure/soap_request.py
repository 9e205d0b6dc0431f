from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ProcessTextParameters

SERVICE_NAMESPACE = "http://typograf.artlebedev.ru/webservices/"

BODY_TEMPLATE = """<soapenv:Envelope xmlns:soapenv='http://schemas.xmlsoap.org/soap/envelope/'>
    <soapenv:Header>
    </soapenv:Header>
    <soapenv:Body>
        <tns:ProcessText xmlns:tns='{namespace}'>
            <tns:text>{text}</tns:text>
            <tns:entityType>{entity_type:d}</tns:entityType>
            <tns:maxNobr>{max_nobr:d}</tns:maxNobr>
            <tns:useBr>{use_br}</tns:useBr>
            <tns:useP>{use_p}</tns:useP>
        </tns:ProcessText>
    </soapenv:Body>
</soapenv:Envelope>
"""


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def render_request_body(parameters: ProcessTextParameters, text: str) -> str:
    """Render the ProcessText SOAP envelope for the given text."""
    return BODY_TEMPLATE.format(
        namespace=SERVICE_NAMESPACE,
        text=escape(text, quote=True),
        entity_type=int(parameters.entity_type),
        max_nobr=int(parameters.max_non_breaking_spaces),
        use_br=_format_bool(parameters.use_break_line_tags),
        use_p=_format_bool(parameters.use_paragraph_tags),
    )
