"""
Canonical resource tags for Pulumi infrastructure.

This package derives and attaches the tags that cost-reporting, ownership
and security tooling rely on:
- Application, environment, group and responder team
- Criticality and security classification
- Git version, commit hash, repository and CI build id
- Data role, master and public flags
"""
