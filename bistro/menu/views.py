from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from bistro.config import API_PREFIX
from bistro.auth.guards import ADMIN_SELF, RequestContext
from bistro.errors import NotFound
from . import repository as menu_repository

router = APIRouter(prefix=API_PREFIX, tags=["Menu API"])

class MenuItemIn(BaseModel):
    # adminEmail éventuellement présent dans le body est ignoré
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(gt=0)
    recipe: Optional[str] = None
    image: Optional[str] = None

class MenuItemPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, gt=0)
    recipe: Optional[str] = None
    image: Optional[str] = None

@router.get("/menus")
def list_menus():
    """Lecture publique du menu complet."""
    return menu_repository.list_menu()

@router.get("/menu-items")
def list_admin_items(ctx: RequestContext = Depends(ADMIN_SELF)):
    """Articles créés par l'administrateur appelant."""
    return menu_repository.list_by_admin(ctx.email)

@router.get("/menu-items/{item_id}")
def get_menu_item(item_id: str):
    item = menu_repository.get_item(item_id)
    if not item:
        raise NotFound("Menu item not found")
    return item

@router.post("/menu-items")
def create_menu_item(req: MenuItemIn, ctx: RequestContext = Depends(ADMIN_SELF)):
    """Création d'un article.
    - admin_email est toujours fixé par le serveur depuis l'identité vérifiée.
    """
    data = req.model_dump(exclude_none=True)
    data["admin_email"] = ctx.email
    return menu_repository.create_item(data)

@router.patch("/menu-items/{item_id}")
def update_menu_item(item_id: str, req: MenuItemPatch, ctx: RequestContext = Depends(ADMIN_SELF)):
    updated = menu_repository.update_item(item_id, req.model_dump(exclude_none=True))
    if not updated:
        raise NotFound("Menu item not found")
    return updated

@router.delete("/menu-items/{item_id}")
def delete_menu_item(item_id: str, ctx: RequestContext = Depends(ADMIN_SELF)):
    deleted = menu_repository.delete_item(item_id)
    if not deleted:
        raise NotFound("Menu item not found")
    return {"deletedCount": deleted}
