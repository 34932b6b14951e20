import logging

from fastapi import FastAPI, Request, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from boggle.dictionary import WordIndex
from boggle.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup, or passed in directly by create_app
_index: WordIndex | None = None

# Changing any of these means the loaded index no longer matches the settings
_INDEX_FIELDS = ("MIN_WORD_LENGTH", "MAX_WORD_LENGTH")


def _load_index() -> WordIndex:
    from boggle.dictionary import load_index
    logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
    return load_index(settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)


def _solve(grid, prune: bool) -> dict:
    from boggle.dice import format_grid
    from boggle.metrics import StageTimer
    from boggle.solver import find_word_paths

    timer = StageTimer()
    with timer.stage("solve"):
        paths = find_word_paths(grid, _index, prune, settings.MIN_WORD_LENGTH, settings.MAX_WORD_LENGTH)
    with timer.stage("sort"):
        all_words = sorted(paths)

    words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
    logger.info("Board %dx%d:\n%s", len(grid), len(grid[0]) if grid else 0, format_grid(grid))
    logger.info("Found %d words (returning %d, prune=%s)", len(all_words), len(words), prune)

    return {
        "grid": grid,
        "words": words,
        "word_count": len(all_words),
        "paths": {w: paths[w] for w in words},
        "processing_time": timer.total_ms,
        "stage_timings": timer.summary(),
    }


def create_app(index: WordIndex | None = None) -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _index

        if settings.DEBUG:
            logger.setLevel(logging.DEBUG)

        _index = index if index is not None else _load_index()
        logger.info("Index ready (%d words)", len(_index))

        yield

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "index_loaded": _index is not None,
            "word_count": len(_index) if _index is not None else 0,
        }

    @application.post("/solve")
    async def solve(request: Request):
        from boggle.solver import InvalidGridError

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict) or "grid" not in body:
            raise HTTPException(400, "Expected a JSON object with a 'grid' field")

        prune = body.get("prune", settings.PRUNE_BY_PREFIX)
        if not isinstance(prune, bool):
            raise HTTPException(400, f"'prune' must be a boolean, got {prune!r}")

        try:
            result = await run_in_threadpool(_solve, body["grid"], prune)
        except InvalidGridError as e:
            logger.warning("Rejected grid: %s", e)
            raise HTTPException(400, str(e))
        return JSONResponse(result)

    @application.get("/roll")
    def roll():
        from boggle.dice import roll_grid
        grid = roll_grid(settings.GRID_SIZE)
        return JSONResponse(_solve(grid, settings.PRUNE_BY_PREFIX))

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        global _index
        from boggle.settings import update_settings, get_editable_settings

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict):
            raise HTTPException(400, "Expected a JSON object of setting names to values")
        before = {name: getattr(settings, name) for name in _INDEX_FIELDS}
        errors = update_settings(settings, **body)
        if any(getattr(settings, name) != value for name, value in before.items()):
            _index = _load_index()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
