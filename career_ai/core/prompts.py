"""
Centralized AI Prompt Repository
- Every prompt is a PromptTemplate record: persona, profile fields, task, output rules
- Rendering is pure, so prompts are testable without a completion client
"""

from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class PromptTemplate(BaseModel):
    """
    A system persona plus a user-prompt layout.

    `task` and `body` are str.format templates. `profile_fields` maps a label
    to a context key and renders as an "About the candidate" bullet list.
    `requirements` render as a bullet list under `requirements_heading`;
    `output_format` is appended verbatim.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    persona: str
    task: str
    profile_fields: Tuple[Tuple[str, str], ...] = ()
    profile_heading: str = "About the candidate:"
    body: str = ""
    requirements_heading: str = "Requirements:"
    requirements: Tuple[str, ...] = ()
    output_format: str = ""
    temperature: float = 0.5

    def render(self, **context: Any) -> str:
        sections: List[str] = [self.task.format(**context)]

        if self.profile_fields:
            lines = [self.profile_heading]
            for label, key in self.profile_fields:
                lines.append(f"- {label}: {_display(context.get(key))}")
            sections.append("\n".join(lines))

        if self.body:
            sections.append(self.body.format(**context))

        if self.requirements:
            lines = [self.requirements_heading]
            lines.extend(f"- {rule}" for rule in self.requirements)
            sections.append("\n".join(lines))

        if self.output_format:
            sections.append(self.output_format)

        return "\n\n".join(sections)


def _display(value: Any) -> str:
    if value is None:
        return "Not specified"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) if value else "Not specified"
    return str(value)


def user_profile_context(user: Any) -> Mapping[str, Any]:
    """Profile attributes of a User row, keyed the way the templates expect."""
    return {
        "industry": user.industry,
        "experience": user.experience,
        "skills": user.skills or [],
        "bio": user.bio,
    }


# --- COVER LETTER ---
COVER_LETTER = PromptTemplate(
    name="cover_letter",
    persona="You are a professional career assistant. Write high-quality markdown cover letters.",
    task="Write a professional cover letter for a {job_title} position at {company_name}.",
    profile_fields=(
        ("Industry", "industry"),
        ("Years of Experience", "experience"),
        ("Skills", "skills"),
        ("Professional Background", "bio"),
    ),
    body="Job Description:\n{job_description}",
    requirements=(
        "Professional and enthusiastic tone",
        "Highlight relevant skills and experience",
        "Show understanding of the company's needs",
        "Max 400 words",
        "Proper business letter formatting in markdown",
        "Include specific achievements",
        "Relate experience to job requirements",
    ),
    temperature=0.5,
)

# --- INDUSTRY INSIGHTS ---
STRICT_JSON_PERSONA = "You are a strict JSON API. Output ONLY valid JSON."

INDUSTRY_INSIGHTS = PromptTemplate(
    name="industry_insights",
    persona=STRICT_JSON_PERSONA,
    task=(
        "Analyze the current state of the {industry} industry and return ONLY valid JSON.\n"
        "No markdown. No explanations."
    ),
    body=(
        "{{\n"
        '  "salaryRanges": [\n'
        '    {{ "role": "string", "min": number, "max": number, "median": number, "location": "string" }}\n'
        "  ],\n"
        '  "growthRate": number,\n'
        '  "demandLevel": "High" | "Medium" | "Low",\n'
        '  "topSkills": ["skill1", "skill2"],\n'
        '  "marketOutlook": "Positive" | "Neutral" | "Negative",\n'
        '  "keyTrends": ["trend1", "trend2"],\n'
        '  "recommendedSkills": ["skill1", "skill2"]\n'
        "}}"
    ),
    requirements_heading="Rules:",
    requirements=(
        "At least 5 roles",
        "Growth rate must be a percentage",
        "At least 5 skills and trends",
    ),
    temperature=0.2,
)

# --- INTERVIEW QUIZ ---
QUIZ_QUESTION_COUNT = 10

INTERVIEW_QUIZ = PromptTemplate(
    name="interview_quiz",
    persona=STRICT_JSON_PERSONA,
    task=(
        "Generate {count} UNIQUE technical interview questions for a {industry} professional"
        "{skills_clause}."
    ),
    body=(
        "Quiz Seed: {seed}\n\n"
        "Do NOT repeat or paraphrase any of the following questions:\n"
        "- {previous_questions}"
    ),
    requirements_heading="Rules:",
    requirements=(
        "Vary difficulty (easy, medium, hard)",
        "Cover different concepts",
        "Avoid similar wording",
        "Each question must be multiple choice with exactly 4 options",
        "Correct answer must be one of the options",
    ),
    output_format=(
        "Return ONLY valid JSON in the following format (no markdown, no explanation):\n\n"
        "{\n"
        '  "questions": [\n'
        "    {\n"
        '      "question": "string",\n'
        '      "options": ["string", "string", "string", "string"],\n'
        '      "correctAnswer": "string",\n'
        '      "explanation": "string"\n'
        "    }\n"
        "  ]\n"
        "}"
    ),
    temperature=0.6,
)

IMPROVEMENT_TIP = PromptTemplate(
    name="improvement_tip",
    persona="You are a helpful interview coach. Provide concise improvement advice.",
    task="The user answered the following {industry} interview questions incorrectly:",
    body="{wrong_questions}",
    requirements_heading="Provide ONE concise improvement tip:",
    requirements=(
        "Max 2 sentences",
        "Encouraging tone",
        "Focus on what to study or practice",
        "Do NOT mention mistakes explicitly",
    ),
    temperature=0.4,
)

# --- RESUME ---
RESUME_IMPROVEMENT = PromptTemplate(
    name="resume_improvement",
    persona="You are an expert resume writer. Rewrite content to be impactful and ATS-friendly.",
    task=(
        "As an expert resume writer, improve the following {section} description "
        "for a {industry} professional."
    ),
    body='Current content:\n"{current}"',
    requirements=(
        "Use strong action verbs",
        "Include metrics and results where possible",
        "Highlight relevant technical skills",
        "Keep it concise but impactful",
        "Focus on achievements over responsibilities",
        "Use industry-specific keywords",
    ),
    output_format="Return ONLY one improved paragraph.\nNo explanations. No markdown.",
    temperature=0.4,
)


def get_prompt(template: PromptTemplate, **kwargs) -> Tuple[str, str]:
    """Return the (system, user) prompt pair for a template."""
    return template.persona, template.render(**kwargs)


def skills_clause(skills: Optional[List[str]]) -> str:
    return f" with expertise in {', '.join(skills)}" if skills else ""
