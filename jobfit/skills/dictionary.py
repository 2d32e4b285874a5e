"""Closed catalog of known skills, partitioned into weight categories.

Weights:
  technical  2.0  languages, frameworks, databases, core platforms
  tools      1.0  tooling, platforms, methodologies, IT processes
  soft       0.5  communication and support competencies
"""
from __future__ import annotations

TECHNICAL = "technical"
TOOLS = "tools"
SOFT = "soft"

SKILL_WEIGHTS: dict[str, float] = {
    TECHNICAL: 2.0,
    TOOLS: 1.0,
    SOFT: 0.5,
}

TECHNICAL_SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C#", "C++", "Go", "Rust",
    "PHP", "Ruby", "Swift", "Kotlin", "Scala", "R", "SQL",
    # Frontend
    "React", "Vue", "Angular", "Svelte", "Next.js", "Nuxt.js", "HTML", "CSS",
    "Sass", "LESS", "Tailwind CSS", "Bootstrap", "Material UI", "Chakra UI",
    "Redux", "MobX", "Zustand",
    # Backend
    "Node.js", "Express", "Fastify", "NestJS", "Django", "Flask", "FastAPI",
    "Spring Boot", "ASP.NET", "Ruby on Rails", "Laravel",
    # Databases
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    "Cassandra", "Oracle", "SQL Server", "SQLite", "Firebase", "Supabase",
    # APIs & protocols
    "REST API", "GraphQL", "gRPC", "WebSocket", "WebRTC", "OAuth", "JWT",
    "OpenAPI",
    # Cloud
    "AWS", "Azure", "GCP", "Lambda", "API Gateway",
    # Testing
    "Jest", "Vitest", "Mocha", "Chai", "Cypress", "Playwright", "Selenium",
    "Testing Library", "JUnit", "pytest",
    # Mobile
    "React Native", "Flutter", "iOS", "Android",
    # Data & ML
    "TensorFlow", "PyTorch", "Scikit-learn", "Pandas", "NumPy", "Jupyter",
    "Machine Learning", "Deep Learning", "NLP", "Computer Vision",
    "Data Analysis", "Data Science",
    # Architecture
    "Microservices", "Serverless", "Progressive Web Apps", "WebAssembly",
    # Networking & systems
    "TCP/IP", "Networking", "VPN", "Firewall", "DNS", "DHCP", "Linux", "Unix",
    "Windows Server", "Active Directory", "AD", "Azure AD",
    # Security
    "Security", "Authentication", "Authorization", "BitLocker", "Antivirus",
)

TOOL_SKILLS: tuple[str, ...] = (
    # Version control & CI/CD
    "Git", "GitHub", "GitLab", "Bitbucket", "Jenkins", "GitLab CI",
    "GitHub Actions", "CircleCI", "Travis CI", "CI/CD",
    # Build
    "Webpack", "Vite", "Rollup",
    # Containers & provisioning
    "Docker", "Kubernetes", "Terraform", "Ansible",
    # Project management & service desks
    "Jira", "Confluence", "ServiceNow", "Zendesk", "Freshdesk",
    # Methodologies
    "Agile", "Scrum", "Kanban", "TDD", "BDD", "ITIL",
    # Development tools
    "Xcode", "Android Studio", "Bash", "PowerShell",
    # Operating systems
    "Windows", "Windows 10", "Windows 11",
    # Communication
    "Microsoft Teams", "Slack", "Zoom", "Skype",
    # Microsoft suite
    "Microsoft Office", "Office 365", "Microsoft 365", "Exchange", "Outlook",
    "OneDrive", "SharePoint",
    # IT management
    "Group Policy", "Intune", "SCCM", "Patch Management",
    "Software Deployment",
    # Remote support
    "Remote Desktop", "RDP", "TeamViewer", "AnyDesk", "VNC",
    # Infrastructure
    "Load Balancing", "Caching", "Message Queue", "RabbitMQ", "Kafka",
    # Virtualization
    "Virtual Machine", "VM", "VMware", "Hyper-V", "VirtualBox",
    # Hardware & networking
    "Hardware", "Printer", "Scanner", "Network Printer", "Wi-Fi", "Wireless",
    "Ethernet", "Switch", "Router", "Modem", "IP Address", "MAC Address",
    "Subnet", "Gateway", "VLAN", "VoIP",
    # Backup & recovery
    "Backup", "Restore", "Imaging", "Cloning",
    # File management
    "File Sharing", "Network Drive", "Mapped Drive",
    # Certifications
    "CompTIA A+", "CompTIA Network+", "CompTIA Security+", "MCSA", "MCSE",
    "CCNA",
    # Processes
    "Incident Management", "Problem Management", "Change Management",
    "Inventory Management", "Asset Management", "User Management",
    "Account Management", "Password Reset", "Permission Management",
    "Ticketing", "ITSM",
    # Optimization
    "Performance Optimization", "Accessibility",
)

SOFT_SKILLS: tuple[str, ...] = (
    "Customer Service", "Communication", "Documentation", "Knowledge Base",
    "Help Desk", "Helpdesk", "Service Desk", "Technical Support",
    "IT Support", "Tier 1", "Tier 2", "Tier 3", "Troubleshooting",
    "Diagnostics", "SLA", "Malware",
)

# Scan order for extraction; also the "discovery order" of job skills.
SKILL_DICTIONARY: tuple[str, ...] = tuple(
    dict.fromkeys(TECHNICAL_SKILLS + TOOL_SKILLS + SOFT_SKILLS)
)

_TECHNICAL_SET = frozenset(TECHNICAL_SKILLS)
_SOFT_SET = frozenset(SOFT_SKILLS)


def category(skill: str) -> str:
    """Return the weight category of *skill*; anything else counts as a tool."""
    if skill in _TECHNICAL_SET:
        return TECHNICAL
    if skill in _SOFT_SET:
        return SOFT
    return TOOLS


def weight(skill: str) -> float:
    return SKILL_WEIGHTS[category(skill)]


def weighted_total(skills: list[str]) -> float:
    return sum(weight(s) for s in skills)


def categorize_skills(skills: list[str]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {TECHNICAL: [], TOOLS: [], SOFT: []}
    for skill in skills:
        grouped[category(skill)].append(skill)
    return grouped
