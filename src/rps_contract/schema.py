"""
rps_contract.schema — JSON Schema export
=========================================

Writes a machine-readable JSON Schema for every message and response
shape, one file per model, so clients can validate payloads without
importing this package.

Usage:
    python -m rps_contract schema --out-dir schema/
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Type

from pydantic import BaseModel

from .types import (
    ContractResponse,
    ExecuteMsg,
    GameStateResponse,
    InstantiateMsg,
    MoveResponse,
    OpponentResponse,
    OwnerResponse,
    QueryMsg,
    ResultResponse,
)

logger = logging.getLogger("rps_contract.schema")

# File stem -> model
SCHEMA_MODELS: Dict[str, Type[BaseModel]] = {
    "instantiate_msg": InstantiateMsg,
    "execute_msg": ExecuteMsg,
    "query_msg": QueryMsg,
    "state": GameStateResponse,
    "move_response": MoveResponse,
    "opponent_response": OpponentResponse,
    "owner_response": OwnerResponse,
    "result_response": ResultResponse,
    "contract_response": ContractResponse,
}


def export_schemas(out_dir: str) -> List[Path]:
    """
    Write one <name>.json schema file per model into out_dir.

    Existing files with the same names are overwritten.

    Returns:
        Paths of the written files
    """
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)

    written = []
    for name, model in SCHEMA_MODELS.items():
        file_path = out_path / f"{name}.json"
        schema = model.model_json_schema()
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2, sort_keys=True)
            f.write("\n")
        written.append(file_path)
        logger.info(f"Wrote schema {file_path}")
    return written
