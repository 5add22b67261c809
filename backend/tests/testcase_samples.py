"""
MobileCases 测试样例

测试共用的 YAML 文本。
"""

VALID_YAML = """\
id: TC001
name: Login with valid credentials
platform: android
priority: high
tags: [auth, smoke]
author: qa
created_at: "2026-01-01"
description: Verify login with valid email and password
steps:
  - action: Enter email into the email field
    expected: Email field shows text
  - action: Tap Login button
    expected: User sees home screen
"""

VALID_YAML_IOS = """\
id: TC002
name: iOS settings check
platform: ios
priority: medium
tags: [settings]
author: qa
created_at: "2026-01-02"
description: Verify settings page loads on iOS
steps:
  - action: Open Settings app
    expected: Settings screen is displayed
"""


def make_yaml(case_id: str, platform: str = "android", priority: str = "low") -> str:
    """生成最小合法用例"""
    return (
        f"id: {case_id}\n"
        f"name: Case {case_id}\n"
        f"platform: {platform}\n"
        f"priority: {priority}\n"
        "tags: []\n"
        "author: qa\n"
        'created_at: "2026-01-01"\n'
        f"description: Description of {case_id}\n"
        "steps:\n"
        "  - action: Do something\n"
        "    expected: Something happens\n"
    )
