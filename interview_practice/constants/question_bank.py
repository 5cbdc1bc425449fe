"""
Description:
Static interview question banks used by the rule-based question generator.

Question texts may contain a {position} placeholder, which is filled with the
lower-cased target position when a candidate pool is built.

- TECHNICAL_QUESTIONS: Technical question sets keyed by role name. The keys are matched as
  substrings of the target position, in insertion order.
- QUESTIONS_BY_TYPE: Flat question sets for the non-technical interview types.
- EXPERIENCE_QUESTIONS: Extra questions added to the pool for senior and lead candidates.
- FALLBACK_QUESTIONS: Generic questions served when the question source is unavailable.
  These never overlap with the primary bank.
"""

DEFAULT_TECHNICAL_ROLE = "software engineer"

TECHNICAL_QUESTIONS = {
    "software engineer": [
        "How would you design a scalable system for {position} at a growing company?",
        "Explain the difference between microservices and monolithic architecture.",
        "How do you handle database optimization in high-traffic applications?",
        "Describe your approach to code review and maintaining code quality.",
        "What testing strategies do you implement for complex software systems?",
        "How would you debug a performance issue in a distributed system?",
        "Explain your experience with CI/CD pipelines and deployment strategies.",
        "How do you stay updated with new technologies and programming languages?",
    ],
    "data scientist": [
        "What machine learning models would you use for {position} challenges?",
        "How do you handle missing data in large datasets?",
        "Explain the bias-variance tradeoff in machine learning.",
        "How would you validate the performance of a predictive model?",
        "Describe your approach to feature engineering and selection.",
        "How do you communicate complex data insights to non-technical stakeholders?",
        "What tools and frameworks do you prefer for data analysis?",
        "How would you design an A/B test for a new feature?",
    ],
    "product manager": [
        "How would you prioritize features for a {position} role?",
        "Describe your process for gathering and analyzing user requirements.",
        "How do you handle conflicting stakeholder priorities?",
        "What metrics would you use to measure product success?",
        "How would you conduct market research for a new product?",
        "Describe your experience with agile development methodologies.",
        "How do you work with engineering teams to deliver products on time?",
        "What tools do you use for product roadmap planning?",
    ],
}

QUESTIONS_BY_TYPE = {
    "behavioral": [
        "Tell me about a challenging project you completed in a {position} role.",
        "Describe a time when you had to work with a difficult team member.",
        "How do you handle tight deadlines and competing priorities?",
        "Give an example of when you had to learn a new skill quickly.",
        "Tell me about a time you disagreed with your manager's decision.",
        "Describe a situation where you had to persuade others to adopt your idea.",
        "How do you handle failure or setbacks in your work?",
        "Tell me about a time you went above and beyond your job responsibilities.",
    ],
    "leadership": [
        "How would you build and lead a team for {position}?",
        "Describe your approach to mentoring junior team members.",
        "How do you handle underperforming team members?",
        "Tell me about a time you had to make a difficult decision as a leader.",
        "How do you foster innovation and creativity in your team?",
        "Describe your communication style with different stakeholders.",
        "How do you manage conflicts within your team?",
        "What strategies do you use to motivate your team during challenging times?",
    ],
    "general": [
        "Why are you interested in this {position} position?",
        "What attracts you to our company and industry?",
        "How do your skills align with this role's requirements?",
        "What are your career goals for the next 3-5 years?",
        "How do you handle work-life balance in demanding roles?",
        "What questions do you have about our company culture?",
        "Describe your ideal work environment and team dynamics.",
        "How do you stay motivated and productive in your work?",
    ],
}

SENIOR_EXPERIENCE_LEVELS = ("senior", "lead")

EXPERIENCE_QUESTIONS = [
    "How would you mentor junior {position}s in your team?",
    "Describe your approach to technical decision-making and architecture choices.",
]

FALLBACK_QUESTIONS = {
    "technical": [
        "What technical challenges do you expect in a {position} role?",
        "Describe your approach to problem-solving in complex technical scenarios.",
        "How do you stay current with technology trends in your field?",
        "Explain a technical project you're particularly proud of.",
        "How do you approach code review and quality assurance?",
    ],
    "behavioral": [
        "Tell me about a challenging project you completed recently.",
        "Describe a time when you had to work under pressure.",
        "How do you handle conflicts with team members?",
        "Give an example of when you had to adapt to change quickly.",
        "Tell me about a time you failed and what you learned.",
    ],
    "leadership": [
        "Describe your leadership style with specific examples.",
        "How do you motivate underperforming team members?",
        "Tell me about a difficult decision you had to make as a leader.",
        "How do you handle disagreements within your team?",
        "Describe how you build and maintain team culture.",
    ],
    "general": [
        "Why do you want to work as a {position}?",
        "What are your greatest strengths and how do they apply to this role?",
        "Where do you see yourself in 5 years?",
        "What motivates you in your professional work?",
        "What questions do you have about our company?",
    ],
}

# Roughly two and a half minutes per question, never more than twelve.
MINUTES_PER_QUESTION = 2.5
MAX_QUESTIONS = 12

DURATION_CHOICES = (10, 15, 20, 30)
