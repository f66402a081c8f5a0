"""Style analysis and comparison engine.

Pure, synchronous functions over immutable values: safe to call from
any request handler or thread without coordination.
"""

from __future__ import annotations

from stylealign.analysis.comparison import (
    ComparisonDetail,
    generate_change_description,
    generate_detailed_comparison,
    get_alignment,
)
from stylealign.analysis.insights import (
    TransformationInsights,
    generate_transformation_insights,
)
from stylealign.analysis.sample_style import (
    SampleStyle,
    analyze_sample_style,
    default_style,
)
from stylealign.analysis.scoring import calculate_alignment_score
from stylealign.analysis.structured import (
    StructuredStyleComparison,
    build_structured_comparison,
)
from stylealign.analysis.text_metrics import TextAnalysis, analyze_text
from stylealign.analysis.transformation import (
    StyleTransformation,
    build_style_transformation,
    compare_style_transformation,
)
from stylealign.analysis.verification import (
    StyleMatchReport,
    verify_style_match,
)

__all__ = [
    "ComparisonDetail",
    "SampleStyle",
    "StructuredStyleComparison",
    "StyleMatchReport",
    "StyleTransformation",
    "TextAnalysis",
    "TransformationInsights",
    "analyze_sample_style",
    "analyze_text",
    "build_structured_comparison",
    "build_style_transformation",
    "calculate_alignment_score",
    "compare_style_transformation",
    "default_style",
    "generate_change_description",
    "generate_detailed_comparison",
    "generate_transformation_insights",
    "get_alignment",
    "verify_style_match",
]
