"""
Resume Extractor Prompt

Turns a free-form personal description into the resume JSON skeleton below.
Single user message, no system prompt | provider defaults for temperature.

The wording (Turkish) and the skeleton are a compatibility boundary: the
frontend renders exactly these keys, so edit them only together.
"""

from resume_ai.models.resume_models import ChatMessage

USER_PROMPT_TEMPLATE = """
Aşağıdaki açıklamayı analiz et ve sadece şu JSON yapısına birebir uygun şekilde dön (geçerli JSON üret):

{{
  "personalInformation": {{
    "fullName": "",
    "email": "",
    "phoneNumber": "",
    "location": "",
    "linkedin": "",
    "gitHub": "",
    "portfolio": ""
  }},
  "summary": "",
  "skills": [
    {{ "title": "", "level": "" }}
  ],
  "experience": [
    {{
      "jobTitle": "",
      "company": "",
      "location": "",
      "duration": "",
      "responsibility": ""
    }}
  ],
  "education": [
    {{
      "degree": "",
      "university": "",
      "location": "",
      "graduationYear": ""
    }}
  ],
  "certifications": [
    {{ "title": "", "issuingOrganization": "", "year": "" }}
  ],
  "projects": [
    {{
      "title": "",
      "description": "",
      "technologiesUsed": [],
      "githubLink": ""
    }}
  ],
  "languages": [{{ "name": "" }}],
  "interests": [{{ "name": "" }}],
  "achievements": [{{ "title": "", "year": "", "extraInformation": "" }}]
}}

Sadece geçerli JSON üret ve başka hiçbir şey yazma. Açıklama: {description}
"""


def build_prompt(description: str) -> ChatMessage:
    """Render the extraction prompt around an already validated description."""
    return ChatMessage(
        role="user",
        content=USER_PROMPT_TEMPLATE.format(description=description),
    )
