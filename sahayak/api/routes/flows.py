"""Dynamic flow routes for Sahayak API.

Registers flow routes using RouteFactory pattern.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, FastAPI

from sahayak.api.dependencies import get_flows_registry
from sahayak.api.factory import RouteFactory

router = APIRouter(tags=["Flows"])


def register_flow_routes(app: FastAPI, flows_registry: Dict[str, Any]) -> None:
    """Register one POST /flows/{flow_name} route per registered flow.

    Args:
        app: FastAPI application instance
        flows_registry: Dictionary of flow configurations with:
            - flow: Flow class
            - type: Flow type (content, media, tools)
            - doc: Documentation string
            - tag: OpenAPI tag

    Example:
        >>> register_flow_routes(app, FLOWS)
        # Creates routes like:
        # POST /flows/local-content
        # POST /flows/lesson-plan
        # POST /flows/quiz
    """
    factory = RouteFactory()

    for flow_name, flow_config in flows_registry.items():
        app.add_api_route(
            f"/flows/{flow_name}",
            factory.create_flow_route(flow_name, flow_config),
            methods=["POST"],
            tags=[flow_config["tag"]],
            summary=flow_config["doc"].split("\n\n")[0],
        )


@router.get("/flows")
async def list_flows(flows_registry: Dict[str, Any] = Depends(get_flows_registry)):
    """List registered flows with their input and output schemas."""
    flows = []
    for name, config in flows_registry.items():
        flow_cls = config["flow"]
        flows.append({
            "name": name,
            "type": config["type"],
            "tag": config["tag"],
            "description": flow_cls.description,
            "path": f"/flows/{name}",
            "input_schema": flow_cls.input_model.model_json_schema(),
            "output_schema": flow_cls.output_model.model_json_schema(),
        })
    return {"flows": flows, "total": len(flows)}
