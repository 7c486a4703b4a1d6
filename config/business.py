"""Business category tables: keywords, services, industries and palettes."""

# Ordered: the first category with a matching keyword wins.
BUSINESS_KEYWORDS = [
    ("technology", ("software", "technology", "development")),
    ("consulting", ("consulting", "advisory", "strategy")),
    ("creative", ("design", "creative", "art")),
    ("healthcare", ("health", "medical", "clinic")),
    ("education", ("education", "learning", "school")),
    ("restaurant", ("restaurant", "food", "dining")),
    ("retail", ("retail", "shop", "store")),
]

BUSINESS_CATEGORIES = [name for name, _ in BUSINESS_KEYWORDS] + ["general"]

INDUSTRIES = {
    "technology": "Technology & Software",
    "consulting": "Professional Services",
    "creative": "Design & Marketing",
    "healthcare": "Healthcare & Medical",
    "education": "Education & Training",
    "restaurant": "Food & Beverage",
    "retail": "Retail & E-commerce",
    "general": "Business Services",
}

DEFAULT_SERVICES = [
    {"title": "Consultation", "description": "Expert guidance tailored to your specific needs."},
    {"title": "Implementation", "description": "Professional execution of your project requirements."},
    {"title": "Support", "description": "Ongoing assistance to ensure your continued success."},
]

SERVICES = {
    "technology": [
        {"title": "Software Development", "description": "Custom software solutions built to your specifications."},
        {"title": "Technical Consulting", "description": "Expert advice on technology strategy and implementation."},
        {"title": "System Integration", "description": "Seamless integration of your existing systems and new solutions."},
    ],
    "consulting": [
        {"title": "Strategic Planning", "description": "Comprehensive planning to achieve your business objectives."},
        {"title": "Process Optimization", "description": "Streamline your operations for maximum efficiency."},
        {"title": "Change Management", "description": "Guide your organization through successful transformations."},
    ],
    "creative": [
        {"title": "Creative Design", "description": "Innovative designs that capture your brand essence."},
        {"title": "Brand Development", "description": "Build a strong, memorable brand identity."},
        {"title": "Marketing Materials", "description": "Professional materials that drive engagement."},
    ],
    "healthcare": [
        {"title": "Patient Care", "description": "Comprehensive healthcare services focused on patient wellbeing."},
        {"title": "Medical Consultation", "description": "Expert medical advice and treatment planning."},
        {"title": "Health Education", "description": "Educational resources to promote healthy living."},
    ],
    "education": [
        {"title": "Learning Programs", "description": "Comprehensive educational programs designed for success."},
        {"title": "Skills Development", "description": "Build essential skills for personal and professional growth."},
        {"title": "Educational Consulting", "description": "Expert guidance on educational strategies and implementation."},
    ],
}

# Checked in order against a color-scheme / palette line.
COLOR_KEYWORDS = [
    ("blue", ("blue", "navy", "azure")),
    ("green", ("green", "emerald", "forest")),
    ("purple", ("purple", "violet", "indigo")),
    ("red", ("red", "crimson", "rose")),
    ("orange", ("orange", "amber", "peach")),
    ("gray", ("gray", "grey", "neutral")),
]

COLOR_SCHEMES = {
    "blue": {"primary": "#3b82f6", "secondary": "#1e40af", "accent": "#60a5fa", "light": "#dbeafe"},
    "green": {"primary": "#10b981", "secondary": "#047857", "accent": "#34d399", "light": "#d1fae5"},
    "purple": {"primary": "#8b5cf6", "secondary": "#6d28d9", "accent": "#a78bfa", "light": "#e9d5ff"},
    "red": {"primary": "#ef4444", "secondary": "#dc2626", "accent": "#f87171", "light": "#fee2e2"},
    "orange": {"primary": "#f59e0b", "secondary": "#d97706", "accent": "#fbbf24", "light": "#fef3c7"},
    "gray": {"primary": "#6b7280", "secondary": "#374151", "accent": "#9ca3af", "light": "#f3f4f6"},
}

STYLE_KEYWORDS = [
    ("minimal", ("minimal", "clean")),
    ("modern", ("modern", "contemporary")),
    ("corporate", ("corporate", "professional")),
    ("creative", ("creative", "artistic")),
    ("bold", ("bold", "vibrant")),
]
