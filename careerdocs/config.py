# careerdocs/config.py
import os
from dataclasses import dataclass, field
from typing import Dict, List, Set
import yaml


@dataclass
class ATSConfig:
    """Tunable data tables and thresholds for ATS scoring"""
    
    # Filtered out of extracted keywords
    stop_words: Set[str] = field(default_factory=lambda: {
        'the', 'and', 'for', 'with', 'that', 'this', 'from', 'your',
        'their', 'will', 'have', 'been', 'were', 'was', 'are', 'has'
    })
    
    # Curated skills checked by substring containment
    common_skills: List[str] = field(default_factory=lambda: [
        'python', 'javascript', 'react', 'typescript', 'node.js', 'sql',
        'aws', 'docker', 'kubernetes', 'git',
        'communication', 'leadership', 'problem-solving', 'teamwork',
        'agile', 'scrum', 'project management',
        'data analysis', 'customer service', 'sales', 'marketing', 'design',
        'ui/ux', 'ndis', 'trauma-informed'
    ])
    
    # Cover letter phrases
    generic_phrases: List[str] = field(default_factory=lambda: [
        'to whom it may concern', 'dear hiring manager', 'i am writing to apply'
    ])
    call_to_action_phrases: List[str] = field(default_factory=lambda: [
        'look forward to', 'would welcome', 'eager to discuss', 'available for'
    ])
    
    # Resume format heuristics (case-sensitive markers)
    layout_markers: List[str] = field(default_factory=lambda: ['Table', 'Chart'])
    min_document_chars: int = 500
    
    # Points added per job keyword found in a sentence but not extracted
    context_bonus: float = 2.0
    
    # Cover letter length tiers (words)
    ideal_min_words: int = 300
    ideal_max_words: int = 400
    short_max_words: int = 200
    
    # Suggestion thresholds
    thresholds: Dict[str, float] = field(default_factory=lambda: {
        'keyword_match': 60,
        'skills_alignment': 70,
        'narrative_quality': 70,
        'personalization': 60,
    })
    
    def __post_init__(self):
        """Normalize values loaded from YAML"""
        self.stop_words = {w.lower() for w in self.stop_words}
        self.common_skills = [s.lower() for s in self.common_skills]
        self.generic_phrases = [p.lower() for p in self.generic_phrases]
        self.call_to_action_phrases = [p.lower() for p in self.call_to_action_phrases]
        
        defaults = {
            'keyword_match': 60,
            'skills_alignment': 70,
            'narrative_quality': 70,
            'personalization': 60,
        }
        self.thresholds = {**defaults, **(self.thresholds or {})}
    
    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get('ats', {}))


def get_config() -> ATSConfig:
    """Get ATS configuration from env or defaults"""
    config_path = os.getenv('ATS_CONFIG', 'config/ats.yaml')
    
    if os.path.exists(config_path):
        return ATSConfig.from_yaml(config_path)
    return ATSConfig()
