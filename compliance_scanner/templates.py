"""Template documents written by auto-fix actions."""

from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import Awaitable, Callable

import structlog

from .utils import write_text_file

logger = structlog.get_logger(__name__)

PRIVACY_POLICY = """# Privacy Policy

## Data Controller
[Your Company Name]

## What Data We Collect
- [List data types]

## Why We Collect It
- [Legal basis under GDPR]

## Your Rights
Under GDPR, you have the right to:
- Access your data
- Rectify inaccurate data
- Erase your data ("right to be forgotten")
- Restrict processing
- Data portability
- Object to processing

## Contact
[DPO contact information]

## Updates
Last updated: {today}
"""

BREACH_PROCEDURE = """# Data Breach Response Procedure

## GDPR Requirement
Notify supervisory authority within **72 hours** of becoming aware of a breach.

## Steps
1. **Detect** - Identify the breach
2. **Contain** - Stop further data loss
3. **Assess** - Determine scope and impact
4. **Notify** - Inform authorities (72h) and affected individuals
5. **Document** - Record all actions taken
6. **Review** - Prevent future occurrences

## Notification Checklist
- [ ] Nature of the breach
- [ ] Categories of data affected
- [ ] Approximate number of individuals affected
- [ ] Contact details of DPO
- [ ] Likely consequences
- [ ] Measures taken to address the breach

## Contacts
- DPO: [email]
- Supervisory Authority: [authority contact]
- Legal Team: [contact]

Last updated: {today}
"""

AI_AUDIT_TRAIL = """# AI Decision Audit Trail

## Purpose
This document describes the logging requirements for AI decisions per EU AI Act.

## What to Log
- Input data (anonymized)
- Model version and parameters
- Output/decision
- Timestamp
- User context (if applicable)
- Confidence scores

## Implementation
Record one structured event per inference, for example:

```python
logger.info(
    "ai_decision",
    input_hash=hash_input(payload),
    output=decision,
    model=model_info,
    purpose="AI inference for user request",
)
```

## Retention
AI decision logs must be retained for the lifetime of the AI system plus 10 years.

Last updated: {today}
"""

AI_RISK_ASSESSMENT = """# AI Risk Assessment

## System Overview
- **Name**: [AI System Name]
- **Purpose**: [What the AI does]
- **Risk Category**: [ ] Minimal [ ] Limited [ ] High [ ] Unacceptable

## Risk Classification (EU AI Act)

### High-Risk Indicators
- [ ] Biometric identification
- [ ] Critical infrastructure
- [ ] Education/vocational training
- [ ] Employment decisions
- [ ] Essential services access
- [ ] Law enforcement
- [ ] Migration/asylum

## Identified Risks
| Risk | Likelihood | Impact | Mitigation |
|------|------------|--------|------------|
| [Risk 1] | Low/Med/High | Low/Med/High | [Mitigation] |

## Mitigation Measures
1. [Measure 1]
2. [Measure 2]

## Review Schedule
- Next review: [Date]
- Reviewed by: [Name]

Last updated: {today}
"""

SECURITY_TXT = """Contact: security@example.com
Expires: {expires}T23:59:00.000Z
Preferred-Languages: en, nl
Canonical: https://example.com/.well-known/security.txt
Policy: https://example.com/security-policy

# NIS2 Compliance: Vulnerability Disclosure
# Update contact info and URLs before deploying
"""


def render(template: str, today: date | None = None) -> str:
    today = today or date.today()
    expires = today + timedelta(days=365)
    return template.format(today=today.isoformat(), expires=expires.isoformat())


async def write_template(root: Path, relative_path: str, template: str) -> bool:
    """Render ``template`` and write it below ``root``.

    Existing files are overwritten. Write errors propagate to the caller.
    """

    target = root / relative_path
    write_text_file(target, render(template))
    logger.info("template_written", path=str(target))
    return True


def template_writer(root: Path, relative_path: str, template: str) -> Callable[[], Awaitable[bool]]:
    """Bind a template write to a zero-argument coroutine function for a ``FixAction``."""

    async def auto_fix() -> bool:
        return await write_template(root, relative_path, template)

    return auto_fix
