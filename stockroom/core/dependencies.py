from fastapi import Request


def get_inventory_store(request: Request):
    """The store constructed by the application lifespan."""
    return request.app.state.inventory_store
