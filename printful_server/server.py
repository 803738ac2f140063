"""MCP server for Printful — tool and resource registration."""

from __future__ import annotations

from fastmcp import FastMCP

from .resources import (
    auth as auth_tools,
    catalog,
    mockups,
    orders,
    product_templates,
    products,
    templates,
)
from .utils.logging import setup_logging

setup_logging()


def create_mcp_server(auth=None):
    """Create and configure the FastMCP server with all tools and resources.

    Args:
        auth: Optional FastMCP auth provider protecting the HTTP transport
    """
    mcp = FastMCP("printful-mcp", auth=auth)

    # -- Tools: auth --------------------------------------------------------
    mcp.tool()(auth_tools.printful_status)

    # -- Tools: sync products -----------------------------------------------
    mcp.tool()(products.printful_sync_products)
    mcp.tool()(products.printful_get_sync_product)
    mcp.tool()(products.printful_create_sync_product)
    mcp.tool()(products.printful_update_sync_product)
    mcp.tool()(products.printful_update_sync_variant)

    # -- Tools: product templates -------------------------------------------
    mcp.tool()(product_templates.printful_product_templates)
    mcp.tool()(product_templates.printful_get_product_template)

    # -- Tools: orders ------------------------------------------------------
    mcp.tool()(orders.printful_orders)
    mcp.tool()(orders.printful_create_order)

    # -- Tools: catalog -----------------------------------------------------
    mcp.tool()(catalog.printful_catalog_products)
    mcp.tool()(catalog.printful_catalog_product)

    # -- Tools: mockup generator --------------------------------------------
    mcp.tool()(mockups.printful_create_mockup_task)
    mcp.tool()(mockups.printful_mockup_task_result)
    mcp.tool()(mockups.printful_print_files)

    # -- Resources ----------------------------------------------------------
    mcp.resource("printful://templates/order")(templates.resource_order_template)
    mcp.resource("printful://templates/sync_product")(templates.resource_sync_product_template)
    mcp.resource("printful://templates/sync_product/{product_id}")(templates.resource_sync_product_by_id)
    mcp.resource("printful://templates/mockup_task")(templates.resource_mockup_task_template)

    return mcp


# Default server instance for stdio transport
server = create_mcp_server()
