from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.common import ActionResult, ErrorOut
from app.schemas.fabric import FabricInstallIn, FabricOut
from app.services.deps import get_position_registry
from app.services.positions import DuplicateFabricCode, PositionRegistry

router = APIRouter(prefix="/api/tecidos", tags=["tecidos"])

error_responses = {409: {"model": ErrorOut}, 500: {"model": ErrorOut}}


@router.get("", response_model=List[FabricOut], responses={500: {"model": ErrorOut}})
def list_fabrics(registry: PositionRegistry = Depends(get_position_registry)):
    return registry.list_installations()

@router.post("", response_model=ActionResult, responses=error_responses)
def install_fabric(
    payload: FabricInstallIn,
    registry: PositionRegistry = Depends(get_position_registry),
):
    """
    Install a fabric at (filtro, placa, lado).
    Any fabric currently in operation there is marked `substituido`.
    """
    try:
        registry.install(payload)
    except DuplicateFabricCode as e:
        raise HTTPException(status_code=409, detail=str(e))
    return ActionResult(message="Tecido instalado com sucesso!")
