from app.data.descriptors import CategoryDescriptor

CATEGORIES = [
    CategoryDescriptor(name="React", description="Rules for React development and components", icon="Code"),
    CategoryDescriptor(name="TypeScript", description="TypeScript specific rules and configurations", icon="FileCode"),
    CategoryDescriptor(name="Node.js", description="Backend development with Node.js", icon="Server"),
    CategoryDescriptor(name="Frontend", description="Frontend development best practices", icon="Monitor"),
    CategoryDescriptor(name="Testing", description="Testing frameworks and methodologies", icon="TestTube"),
    CategoryDescriptor(name="DevOps", description="DevOps, CI/CD, and deployment rules", icon="Cloud"),
    CategoryDescriptor(name="Database", description="Database design and optimization", icon="Database"),
    CategoryDescriptor(name="Security", description="Security best practices and guidelines", icon="Shield"),
    CategoryDescriptor(name="Performance", description="Performance optimization techniques", icon="Zap"),
    CategoryDescriptor(name="Mobile", description="Mobile development for iOS and Android", icon="Smartphone"),
    CategoryDescriptor(name="Python", description="Python development and frameworks", icon="FileText"),
    CategoryDescriptor(name="JavaScript", description="Modern JavaScript and ES6+", icon="Code2"),
    CategoryDescriptor(name="CSS/SCSS", description="Styling with CSS, SASS, and frameworks", icon="Palette"),
    CategoryDescriptor(name="Vue.js", description="Vue.js framework and ecosystem", icon="Code"),
    CategoryDescriptor(name="Angular", description="Angular framework development", icon="Code"),
    CategoryDescriptor(name="Next.js", description="Next.js full-stack development", icon="FileText"),
    CategoryDescriptor(name="GraphQL", description="GraphQL API development", icon="Share2"),
    CategoryDescriptor(name="REST API", description="RESTful API design and development", icon="Link"),
    CategoryDescriptor(name="Docker", description="Containerization with Docker", icon="Package"),
    CategoryDescriptor(name="AWS", description="Amazon Web Services cloud development", icon="Cloud"),
    CategoryDescriptor(name="Machine Learning", description="ML and AI development rules", icon="Brain"),
    CategoryDescriptor(name="Data Science", description="Data analysis and visualization", icon="BarChart"),
    CategoryDescriptor(name="Game Development", description="Game development with various engines", icon="Gamepad2"),
    CategoryDescriptor(name="Blockchain", description="Blockchain and cryptocurrency development", icon="Link2"),
    CategoryDescriptor(name="Microservices", description="Microservices architecture patterns", icon="Grid3x3"),
    CategoryDescriptor(name="Rust", description="Systems programming with Rust", icon="Code"),
    CategoryDescriptor(name="Go", description="Go language development", icon="FileCode"),
    CategoryDescriptor(name="Java", description="Java enterprise development", icon="Coffee"),
    CategoryDescriptor(name="C#/.NET", description=".NET and C# development", icon="Code"),
    CategoryDescriptor(name="Swift", description="iOS development with Swift", icon="Smartphone"),
    CategoryDescriptor(name="Kotlin", description="Android development with Kotlin", icon="Smartphone"),
    CategoryDescriptor(name="Accessibility", description="Web accessibility guidelines", icon="Eye"),
    CategoryDescriptor(name="SEO", description="Search engine optimization", icon="Search"),
    CategoryDescriptor(name="UX/UI", description="User experience and interface design", icon="Palette"),
    CategoryDescriptor(name="Git/Version Control", description="Version control best practices", icon="GitBranch"),
]
