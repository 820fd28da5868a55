"""
Services package.

Provides business logic layer between API and core algorithms.

Modules:
    track_analysis_service: Analysis pipeline for GPX tracks
    wind_service: Wind estimation for flights and flight record fields
"""

from services.track_analysis_service import analyze_track_data, analyze_track_file, TrackAnalysisResult
from services.wind_service import WindService, get_wind_service, parse_wing_size

__all__ = [
    'analyze_track_data',
    'analyze_track_file',
    'TrackAnalysisResult',
    'WindService',
    'get_wind_service',
    'parse_wing_size',
]
