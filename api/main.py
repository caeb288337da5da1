# api/main.py
"""
FastAPI backend for RevolveCraft - exposes the pappus_kit engine as REST API.
"""

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field, field_validator

from pappus_kit.config import CONFIG
from pappus_kit.engine import centroid_path_visible, compare_axes, evaluate
from pappus_kit.export import generate_report_json, generate_segments_csv
from pappus_kit.model import Axis, RevolutionReport
from pappus_kit.parse import coerce_coordinate
from pappus_kit.report import format_report, report_metrics


# basicConfig affects root logger; keep it idempotent
if not logging.getLogger().handlers:
    logging.basicConfig(level=CONFIG.log_level, format=CONFIG.log_format)

logger = logging.getLogger("pappus_api")


app = FastAPI(
    title=f"{CONFIG.app_name} API",
    description=CONFIG.app_subtitle,
    version=CONFIG.version,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(">>> %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled exception during %s %s", request.method, request.url.path)
        raise
    logger.info("<<< %s %s %s", request.method, request.url.path, response.status_code)
    return response


# =============================================================================
# Request/Response Models
# =============================================================================

class PointInput(BaseModel):
    """One endpoint as typed by the user. Unusable values count as 0."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Any JSON value is accepted here: numbers, entry-box text, null, even lists
    @field_validator("x", "y", "z", mode="before")
    @classmethod
    def coerce(cls, value):
        return coerce_coordinate(value)


class SegmentInput(BaseModel):
    """Segment endpoints in polyline order."""
    p1: PointInput = Field(default_factory=PointInput)
    p2: PointInput = Field(default_factory=PointInput)


class RevolutionParams(BaseModel):
    """Input for an evaluation."""
    segments: List[SegmentInput] = Field(default_factory=list, description="Polyline segments in order")
    axis: Axis = Field(Axis(CONFIG.default_axis), description="Axis of revolution: x, y or z")
    sweep_angle: float = Field(
        CONFIG.default_sweep_angle,
        ge=CONFIG.sweep_angle_range[0],
        le=CONFIG.sweep_angle_range[1],
        description="Displayed sweep (degrees). Does not affect any computed value.",
    )

    @field_validator("axis", mode="before")
    @classmethod
    def parse_axis(cls, value):
        return Axis.parse(value)

    def raw_pairs(self) -> list:
        return [(seg.p1.model_dump(), seg.p2.model_dump()) for seg in self.segments]


class SegmentData(BaseModel):
    """Validated segment with derived values."""
    index: int
    p1: List[float]
    p2: List[float]
    length: float
    centroid: List[float]


class MetricsData(BaseModel):
    """Computed quantities (full 360° revolution)."""
    axis: str
    n_segments: int
    n_dropped: int
    total_length: float
    centroid: Optional[List[float]] = None
    radius: float
    circumference: float
    surface_area: float


class RevolutionResult(BaseModel):
    """Complete evaluation result."""
    success: bool
    axis: str
    sweep_angle: float
    centroid_path_visible: bool
    metrics: MetricsData
    display: Dict[str, str]
    segments: List[SegmentData]


class AxisComparison(BaseModel):
    """Surface area of the same polyline about one axis."""
    axis: str
    total_length: float
    radius: float
    circumference: float
    surface_area: float


# =============================================================================
# Evaluation
# =============================================================================

def run_evaluation(params: RevolutionParams) -> RevolutionReport:
    """Evaluate the request's polyline about its axis."""
    report = evaluate(params.raw_pairs(), params.axis)
    if report.n_dropped:
        logger.info("Ignored %d degenerate segment(s) of %d", report.n_dropped, report.n_input_segments)
    return report


def build_result(report: RevolutionReport, sweep_angle: float) -> RevolutionResult:
    segments = [
        SegmentData(
            index=i,
            p1=list(seg.p1),
            p2=list(seg.p2),
            length=seg.length,
            centroid=list(seg.centroid),
        )
        for i, seg in enumerate(report.segments)
    ]

    return RevolutionResult(
        success=True,
        axis=report.axis.value,
        sweep_angle=sweep_angle,
        centroid_path_visible=centroid_path_visible(report.pappus.radius, sweep_angle),
        metrics=MetricsData(**report_metrics(report)),
        display=format_report(report),
        segments=segments,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": f"{CONFIG.app_name} API"}


@app.post("/api/evaluate", response_model=RevolutionResult)
async def evaluate_revolution(params: RevolutionParams):
    """Compute length, centroid and Pappus surface area of a polyline."""
    report = run_evaluation(params)
    return build_result(report, params.sweep_angle)


@app.post("/api/compare-axes", response_model=List[AxisComparison])
async def compare_revolution_axes(params: RevolutionParams):
    """Surface area of the polyline about each of X, Y and Z."""
    report = run_evaluation(params)
    df = compare_axes(report.segments)
    return [AxisComparison(**row) for row in df.to_dict(orient='records')]


@app.post("/api/export/csv")
async def export_csv(params: RevolutionParams):
    """Export the segment table as CSV."""
    report = run_evaluation(params)

    if not report.segments:
        raise HTTPException(status_code=400, detail="No valid segments to export.")

    return StreamingResponse(
        iter([generate_segments_csv(report)]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=polyline_segments.csv"}
    )


@app.post("/api/export/json")
async def export_json(params: RevolutionParams):
    """Export the evaluation as JSON."""
    report = run_evaluation(params)

    if not report.segments:
        raise HTTPException(status_code=400, detail="No valid segments to export.")

    return StreamingResponse(
        iter([generate_report_json(report, sweep_angle=params.sweep_angle)]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=revolution_report.json"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
