import logging
from typing import Annotated, Any, List, Optional

import pandas as pd
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from flipsolver import Contradiction, InvalidFix, solve, solve_state
from flipsolver.config import (
    GRID_SIZE, MAX_COIN_SUM, MAX_VOLTORBS, MIN_COIN_SUM, MIN_VOLTORBS,
)
from flipsolver.grid.parser import build_targets_frame
from flipsolver.postprocess.render_image import image_to_png_bytes, render_heatmap
from flipsolver.presets import list_presets

# ============================================================
# Configuration & Logging
# ============================================================
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("flipsolver_api")

app = FastAPI()


# ============================================================
# Pydantic Models
# ============================================================
CoinSum = Annotated[int, Field(ge=MIN_COIN_SUM, le=MAX_COIN_SUM)]
VoltorbCount = Annotated[int, Field(ge=MIN_VOLTORBS, le=MAX_VOLTORBS)]


class Targets(BaseModel):
    row_sums: List[CoinSum] = Field(min_length=GRID_SIZE, max_length=GRID_SIZE)
    row_voltorbs: List[VoltorbCount] = Field(min_length=GRID_SIZE, max_length=GRID_SIZE)
    col_sums: List[CoinSum] = Field(min_length=GRID_SIZE, max_length=GRID_SIZE)
    col_voltorbs: List[VoltorbCount] = Field(min_length=GRID_SIZE, max_length=GRID_SIZE)


class SolveRequest(BaseModel):
    targets: Targets
    # 5x5; "" / null = not flipped yet, "1".."3" = coin, "0" / "O" / "V" = Voltorb
    board: Optional[List[List[Any]]] = None


class HealthResponse(BaseModel):
    ok: bool


def targets_to_df(t: Targets) -> pd.DataFrame:
    return build_targets_frame(t.row_sums, t.row_voltorbs, t.col_sums, t.col_voltorbs)


def board_json_to_df(board_json):
    if board_json is None:
        return None
    return pd.DataFrame(board_json)


def contradiction_detail(e: Contradiction) -> dict:
    detail = {"error": "contradiction", "line": e.line, "index": e.index, "message": str(e)}
    if isinstance(e, InvalidFix):
        detail.update({"error": "invalid_fix", "row": e.row, "col": e.col, "value": e.value})
    elif e.unsatisfiable:
        # every line whose targets admit no arrangement, not only the first one hit
        detail.update({
            "error": "unsatisfiable_line",
            "lines": [
                {"line": w.kind, "index": w.index, "coin_sum": w.coin_sum,
                 "voltorbs": w.voltorbs, "candidates": 0, "message": w.message}
                for w in e.unsatisfiable
            ],
        })
    return detail


# ============================================================
# Health / Presets
# ============================================================
@app.get("/health", response_model=HealthResponse)
async def health():
    return {"ok": True}


@app.get("/api/presets")
async def api_presets():
    return {"presets": list_presets()}


# ============================================================
# API Endpoints
# ============================================================
@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives line targets and the flipped cells, runs propagation, returns per-cell results.
    Stateless: the client resends everything on each call.
    """
    try:
        result = solve(targets_to_df(request.targets), board_json_to_df(request.board))
        result["status"] = "ok"
        return result
    except Contradiction as e:
        logger.info("Contradiction: %s", e)
        raise HTTPException(status_code=422, detail=contradiction_detail(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"error": "invalid_input", "message": str(e)})
    except Exception as e:
        logger.error("Solve Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/heatmap.png")
async def api_heatmap(request: SolveRequest):
    """Same input as /api/solve, returns the heatmap as a PNG image."""
    try:
        state, row_targets, col_targets = solve_state(
            targets_to_df(request.targets), board_json_to_df(request.board)
        )
        png = image_to_png_bytes(render_heatmap(state, row_targets, col_targets))
        return Response(content=png, media_type="image/png")
    except Contradiction as e:
        raise HTTPException(status_code=422, detail=contradiction_detail(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"error": "invalid_input", "message": str(e)})
    except Exception as e:
        logger.error("Heatmap Error", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
