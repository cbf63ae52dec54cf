"""
Router: GET /operators
Listuje znane operatory z arnością i informacją o ewaluacji / zwijaniu.
"""
from fastapi import APIRouter

from adapters.evaluator.ast_evaluator import OPERATIONS
from adapters.simplifier.constant_folder import FOLDED_OPERATORS
from api.schemas import OperatorInfo
from contracts import OPERATOR_ARITY

router = APIRouter(tags=["operators"])


@router.get("/operators", response_model=list[OperatorInfo])
async def list_operators() -> list[OperatorInfo]:
    return [
        OperatorInfo(
            name=name,
            arity=arity,
            evaluated=name in OPERATIONS,
            folded=name in FOLDED_OPERATORS,
        )
        for name, arity in OPERATOR_ARITY.items()
    ]
