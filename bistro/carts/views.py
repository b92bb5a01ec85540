from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from bistro.config import API_PREFIX
from bistro.auth.guards import AUTHENTICATED, SELF_CART, RequestContext
from bistro.errors import NotFound
from . import repository as carts_repository

router = APIRouter(prefix=API_PREFIX, tags=["Cart API"])

class CartItemIn(BaseModel):
    # userEmail éventuellement présent dans le body est ignoré: le propriétaire vient du token
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    menu_item_id: str = Field(alias="menuItemId", min_length=1)
    name: Optional[str] = None
    image: Optional[str] = None
    price: float = Field(gt=0)

@router.get("/cart")
def list_cart(ctx: RequestContext = Depends(SELF_CART)):
    """Lignes de panier de l'appelant (?userEmail= doit correspondre au token)."""
    return carts_repository.list_by_user(ctx.email)

@router.post("/cart")
def add_to_cart(req: CartItemIn, ctx: RequestContext = Depends(AUTHENTICATED)):
    item = req.model_dump(exclude_none=True)
    item["user_email"] = ctx.email
    return carts_repository.insert(item)

@router.delete("/cart/{item_id}")
def remove_from_cart(item_id: str, ctx: RequestContext = Depends(AUTHENTICATED)):
    """Supprime une ligne du panier de l'appelant; 404 si absente ou appartenant à un autre."""
    deleted = carts_repository.delete_one(item_id, ctx.email)
    if not deleted:
        raise NotFound("Cart item not found")
    return {"deletedCount": deleted}
