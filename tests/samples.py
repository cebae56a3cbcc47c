SAMPLE_RESUME = (
    "John Doe\n"
    "john.doe@example.com | +1 (555) 123-4567 | linkedin.com/in/johndoe | github.com/johndoe\n"
    "\n"
    "Summary\n"
    "Full-stack developer with 6+ years of experience building scalable web applications. "
    "Led cross-functional teams and delivered high-impact features.\n"
    "\n"
    "Skills\n"
    "JavaScript, TypeScript, React, Node.js, Express, GraphQL, REST, PostgreSQL, MongoDB, Docker, AWS, CI/CD, Git\n"
    "\n"
    "Experience\n"
    "Senior Software Engineer, Acme Corp — Jan 2021 – Present\n"
    "- Led migration to microservices, improving deployment frequency by 40%.\n"
    "- Designed and implemented GraphQL gateway; reduced API latency by 25%.\n"
    "- Optimized PostgreSQL queries, reducing costs by 15%.\n"
    "\n"
    "Software Engineer, Beta Inc — Jul 2018 – Dec 2020\n"
    "- Built React component library; improved developer velocity by 30%.\n"
    "- Implemented CI/CD pipeline with Jenkins and Docker.\n"
    "\n"
    "Education\n"
    "B.S. in Computer Science, University of Example — 2018\n"
    "\n"
    "Projects\n"
    "Realtime chat app with WebSocket and Redis pub/sub.\n"
    "\n"
    "Certifications\n"
    "AWS Certified Developer – Associate\n"
)

SAMPLE_JD = (
    "We are seeking a Senior Full-Stack Engineer proficient in JavaScript/TypeScript, React, Node.js, and AWS. "
    "Experience with microservices, REST/GraphQL APIs, PostgreSQL, CI/CD, Docker, and Kubernetes is required. "
    "Nice to have: Redis, MongoDB, Terraform. Strong communication skills and the ability to deliver "
    "high-quality software in an agile environment.\n"
)
