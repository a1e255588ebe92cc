"""
Demo dataset for previewing the result view without network access.
"""
from typing import List

from scholar_search.schemas.search import SourceTag
from scholar_search.services.sources import Paper

DEMO_QUERY = "digital twin geriatric"


def demo_papers() -> List[Paper]:
    return [
        Paper(
            id="demo_1",
            title="Digital Twin Technology for Geriatric Fall Prediction: A Systematic Review",
            abstract=(
                "This systematic review examines the current state of digital twin applications "
                "in predicting and preventing falls among elderly populations. We analyzed 25 studies "
                "demonstrating the efficacy of virtual patient models in fall risk assessment."
            ),
            authors=("Smith, J.", "Johnson, A.", "Brown, M."),
            year=2023,
            journal="Journal of Geriatric Medicine",
            source=SourceTag.PUBMED,
            url="#",
            score=0.95,
        ),
        Paper(
            id="demo_2",
            title="Machine Learning Approaches for Polypharmacy Optimization in Elderly Patients",
            abstract=(
                "Our research explores computational models for medication management in geriatric "
                "patients with multiple comorbidities. The digital twin approach showed 40% improvement "
                "in adverse drug event prediction."
            ),
            authors=("Wang, L.", "Zhang, K.", "Chen, R."),
            year=2024,
            journal="arXiv",
            source=SourceTag.ARXIV,
            url="#",
            pdf_url="#",
            score=0.87,
        ),
    ]
