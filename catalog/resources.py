STATIC_RESOURCES = [
    {
        "id": "yc_school",
        "title": "Y Combinator's Startup School",
        "type": "course_platform",
        "url": "https://www.startupschool.org/",
        "description": "Free online course for aspiring entrepreneurs on how to build, launch, and grow a startup.",
        "tags": ["entrepreneurship", "YC", "startups", "innovation"],
    },
    {
        "id": "sat_bluebook",
        "title": "Bluebook Digital Testing App",
        "type": "tool",
        "url": "https://bluebook.collegeboard.org/",
        "description": "The official app for the Digital SAT, used for full-length practice tests in the real testing environment.",
        "tags": ["SAT", "digital", "official"],
    },
    {
        "id": "sat1",
        "title": "Official SAT Practice - Khan Academy",
        "type": "tool",
        "url": "https://www.khanacademy.org/sat",
        "description": "Personalized SAT practice plans based on diagnostic results, built with College Board.",
        "tags": ["SAT", "test prep", "college admission"],
    },
    {
        "id": "sat2",
        "title": "SAT Suite of Assessments (International)",
        "type": "article",
        "url": "https://satsuite.collegeboard.org/sat/international",
        "description": "Information for students in India and abroad: test centers, international fees and ID requirements.",
        "tags": ["SAT", "international", "admission"],
    },
    {
        "id": "mit_highschool",
        "title": "MIT OpenCourseWare: Highlights for High School",
        "type": "course_platform",
        "url": "https://ocw.mit.edu/high-school/",
        "description": "Free MIT course materials curated for high school students exploring advanced STEM topics.",
        "tags": ["STEM", "advanced", "academics"],
    },
    {
        "id": "res1",
        "title": "Understanding Your RIASEC Score",
        "type": "article",
        "url": "https://www.onetcenter.org/IP.html",
        "description": "How Holland Codes work and how interest patterns map to the world of work.",
        "tags": ["riasec", "career exploration"],
    },
    {
        "id": "res3",
        "title": "Mastering Study Skills & Time Management",
        "type": "article",
        "url": "https://learningcenter.unc.edu/tips-and-tools/",
        "description": "Techniques to improve memory, concentration and organization for school.",
        "tags": ["study skills", "productivity"],
    },
    {
        "id": "res4",
        "title": "Coursera: Career Discovery Specializations",
        "type": "course_platform",
        "url": "https://www.coursera.org/browse/personal-development",
        "description": "Beginner-friendly courses to explore industries before committing to a major.",
        "tags": ["online learning", "discovery"],
    },
    {
        "id": "res5",
        "title": "Headspace for Students",
        "type": "tool",
        "url": "https://www.headspace.com/studentplan",
        "description": "Mindfulness tools to help students manage exam stress and improve focus.",
        "tags": ["well-being", "mental health"],
    },
    {
        "id": "res8",
        "title": "Google Career Certificates",
        "type": "tool",
        "url": "https://grow.google/certificates/",
        "description": "Professional training for fields like Data Analytics, UX Design and IT Support.",
        "tags": ["skills", "certification"],
    },
]
