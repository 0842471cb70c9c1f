from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from core.config import settings
from services.ats_scorer import ATSScorer
from services.exceptions import AnalysisError
from services.insights import build_summary, get_improvement_potential, get_insights
from models.analysis_models import AnalyzeRequest, AnalyzeResponse
import logging


app = FastAPI(title="ATS Resume Matcher API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Initialize services
ats_scorer = ATSScorer()


@app.get("/")
async def root():
    return {"message": "ATS Resume Matcher API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "ats_scorer": "running"
        }
    }


@app.post("/api/ats/analyze", response_model=AnalyzeResponse)
def analyze(request: AnalyzeRequest):
    """
    Analyze resume text against a job description
    """
    # Validate input lengths
    if len(request.resume_text.strip()) < settings.min_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume text must be at least {settings.min_resume_chars} characters"
        )
    if len(request.job_description.strip()) < settings.min_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description must be at least {settings.min_job_description_chars} characters"
        )

    try:
        analysis = ats_scorer.analyze_resume(request.resume_text, request.job_description)
    except AnalysisError as e:
        logger.error(f"Error analyzing resume: {str(e)}")
        raise HTTPException(status_code=500, detail="Error during resume analysis")

    logger.info(f"Analysis served with score {analysis.overall_score}")
    return AnalyzeResponse(
        score=analysis.overall_score,
        analysis=analysis,
        summary=build_summary(analysis),
        insights=get_insights(analysis),
        improvement_potential=get_improvement_potential(analysis),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
