"""
Open-source alternative models.

Platforms, features, screenshots, languages and pros/cons are value lists
stored as JSON columns on the alternative row.
"""

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text
from datetime import datetime
from typing import List, Optional

from .database import Base, utcnow
from .schema import CatalogModel


class OpenSourceAlternative(Base):
    """Database model for open-source alternatives."""

    __tablename__ = "alternatives"

    id = Column(String(200), primary_key=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    website = Column(String(500), nullable=False)
    repository = Column(String(500))
    logo = Column(String(500))
    screenshots = Column(JSON, nullable=False, default=list)

    proprietary_software_id = Column(
        String(200), ForeignKey("proprietary_software.id"), nullable=False, index=True
    )
    category_id = Column(String(100), ForeignKey("categories.id"), nullable=False, index=True)

    # Technical details
    license = Column(String(100), nullable=False)
    platforms = Column(JSON, nullable=False, default=list)
    languages = Column(JSON, nullable=False, default=list)
    last_updated = Column(DateTime, default=utcnow)

    # Features and comparison
    features = Column(JSON, nullable=False, default=list)
    pros = Column(JSON, nullable=False, default=list)
    cons = Column(JSON, nullable=False, default=list)

    # Community metrics
    stars = Column(Integer)
    forks = Column(Integer)
    contributors = Column(Integer)

    # User engagement
    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    bookmark_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class Platform(CatalogModel):
    name: str
    icon: str
    supported: bool = True


class Feature(CatalogModel):
    name: str
    description: str = ""
    available: bool = True
    notes: Optional[str] = None


class AlternativeRecord(CatalogModel):
    """Open-source alternative record."""
    id: str
    name: str
    description: str
    website: str
    repository: Optional[str] = None
    logo: Optional[str] = None
    screenshots: List[str] = []
    proprietary_software_id: str
    category_id: str

    license: str
    platforms: List[Platform] = []
    languages: List[str] = []
    last_updated: datetime

    features: List[Feature] = []
    pros: List[str] = []
    cons: List[str] = []

    stars: Optional[int] = None
    forks: Optional[int] = None
    contributors: Optional[int] = None

    rating: float = 0
    review_count: int = 0
    bookmark_count: int = 0

    created_at: datetime
    updated_at: datetime

    @property
    def platform_names(self) -> List[str]:
        return [p.name for p in self.platforms]


def _platforms(*names: str) -> List[dict]:
    icons = {"Windows": "Monitor", "macOS": "Apple", "Linux": "Tux", "Web": "Globe"}
    return [{"name": n, "icon": icons[n], "supported": True} for n in names]


def _features(*pairs) -> List[dict]:
    return [{"name": n, "description": d, "available": True} for n, d in pairs]


SAMPLE_ALTERNATIVES = [
    {
        "id": "libreoffice",
        "name": "LibreOffice",
        "description": "Free and open source office suite with Writer, Calc, Impress, and more",
        "website": "https://libreoffice.org",
        "repository": "https://github.com/LibreOffice/core",
        "category_id": "office-suites",
        "proprietary_software_id": "microsoft-office",
        "license": "MPL-2.0",
        "platforms": _platforms("Windows", "macOS", "Linux"),
        "languages": ["C++", "Java", "Python"],
        "features": _features(
            ("Word Processing", "Full-featured word processor"),
            ("Spreadsheets", "Advanced spreadsheet application"),
            ("Presentations", "Presentation creation tool"),
            ("Database", "Database management system"),
        ),
        "pros": [
            "Completely free and open source",
            "Cross-platform compatibility",
            "Regular updates and community support",
            "Extensive format support",
        ],
        "cons": [
            "Interface may feel dated compared to modern alternatives",
            "Some advanced features may be missing",
            "Large file size",
        ],
        "stars": 1500,
        "forks": 300,
        "contributors": 200,
        "rating": 4.2,
        "review_count": 1250,
        "bookmark_count": 890,
    },
    {
        "id": "audacious",
        "name": "Audacious",
        "description": "Lightweight audio player with extensive format support",
        "website": "https://audacious-media-player.org",
        "repository": "https://github.com/audacious-media-player/audacious",
        "category_id": "media-players",
        "proprietary_software_id": "spotify",
        "license": "BSD-2-Clause",
        "platforms": _platforms("Windows", "macOS", "Linux"),
        "languages": ["C++", "C"],
        "features": _features(
            ("Audio Playback", "High-quality audio playback"),
            ("Playlist Support", "Create and manage playlists"),
            ("Plugin System", "Extensible with plugins"),
            ("Streaming", "Internet radio streaming"),
        ),
        "pros": [
            "Lightweight and fast",
            "Excellent audio quality",
            "Highly customizable",
            "Low resource usage",
        ],
        "cons": [
            "No built-in music library",
            "Limited streaming services integration",
            "Basic interface",
        ],
        "stars": 800,
        "forks": 150,
        "contributors": 50,
        "rating": 4.0,
        "review_count": 320,
        "bookmark_count": 180,
    },
    {
        "id": "vscode",
        "name": "Visual Studio Code",
        "description": "Free, open source code editor with excellent extensions and debugging support",
        "website": "https://code.visualstudio.com",
        "repository": "https://github.com/microsoft/vscode",
        "category_id": "development",
        "proprietary_software_id": "sublime-text",
        "license": "MIT",
        "platforms": _platforms("Windows", "macOS", "Linux", "Web"),
        "languages": ["TypeScript", "JavaScript", "C++"],
        "features": _features(
            ("IntelliSense", "Smart code completion and suggestions"),
            ("Debugging", "Built-in debugger with breakpoints"),
            ("Extensions", "Rich extension ecosystem"),
            ("Git Integration", "Built-in Git support"),
        ),
        "pros": [
            "Free and open source",
            "Excellent extension ecosystem",
            "Great debugging tools",
            "Cross-platform support",
            "Regular updates",
        ],
        "cons": [
            "Can be resource intensive",
            "Large download size",
            "Microsoft-owned (though open source)",
        ],
        "stars": 150000,
        "forks": 26000,
        "contributors": 1000,
        "rating": 4.8,
        "review_count": 5000,
        "bookmark_count": 12000,
    },
    {
        "id": "vim",
        "name": "Vim",
        "description": "Highly configurable text editor built for efficient text editing",
        "website": "https://vim.org",
        "repository": "https://github.com/vim/vim",
        "category_id": "development",
        "proprietary_software_id": "sublime-text",
        "license": "Vim License",
        "platforms": _platforms("Windows", "macOS", "Linux"),
        "languages": ["C", "Vim script"],
        "features": _features(
            ("Modal Editing", "Different modes for different editing tasks"),
            ("Extensibility", "Highly customizable with plugins"),
            ("Keyboard Shortcuts", "Efficient keyboard-driven editing"),
            ("Syntax Highlighting", "Support for many programming languages"),
        ),
        "pros": [
            "Extremely fast and lightweight",
            "Powerful keyboard shortcuts",
            "Highly customizable",
            "Available everywhere",
            "Large plugin ecosystem",
        ],
        "cons": [
            "Steep learning curve",
            "Not beginner-friendly",
            "Modal editing can be confusing",
            "Outdated interface",
        ],
        "stars": 30000,
        "forks": 5000,
        "contributors": 200,
        "rating": 4.3,
        "review_count": 2000,
        "bookmark_count": 5000,
    },
    {
        "id": "emacs",
        "name": "GNU Emacs",
        "description": "Extensible, customizable text editor with Lisp-based extension language",
        "website": "https://gnu.org/software/emacs",
        "repository": "https://git.savannah.gnu.org/cgit/emacs.git",
        "category_id": "development",
        "proprietary_software_id": "sublime-text",
        "license": "GPL-3.0",
        "platforms": _platforms("Windows", "macOS", "Linux"),
        "languages": ["C", "Emacs Lisp"],
        "features": _features(
            ("Lisp Extensions", "Extensible with Emacs Lisp"),
            ("Org Mode", "Powerful note-taking and organization"),
            ("Magit", "Excellent Git interface"),
            ("Multiple Buffers", "Work with multiple files simultaneously"),
        ),
        "pros": [
            "Highly extensible",
            "Powerful Org mode",
            "Excellent Git integration",
            "Cross-platform",
            "Free software",
        ],
        "cons": [
            "Complex for beginners",
            "Lisp learning curve",
            "Can be slow with many extensions",
            "Memory usage can be high",
        ],
        "stars": 2000,
        "forks": 500,
        "contributors": 100,
        "rating": 4.1,
        "review_count": 800,
        "bookmark_count": 1500,
    },
]
