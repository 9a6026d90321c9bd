import copy


SCAM_VERDICT = {
    "isScam": True,
    "confidence": 0.92,
    "reasons": ["口座情報を求めている", "罰金で不安を煽っている"],
    "riskLevel": "high",
    "details": {
        "urgency": {"detected": True, "examples": ["今すぐ"]},
        "moneyRequest": {"detected": False, "examples": []},
        "personalInfo": {"detected": True, "examples": ["口座情報を送らないと"]},
        "unnaturalInvitation": {"detected": False, "examples": []},
        "fearAppeal": {"detected": True, "examples": ["罰金が発生します"]},
        "suspiciousUrl": {"detected": False, "examples": []},
        "suspiciousSender": {"detected": False, "examples": []},
        "otherRisks": {"detected": False, "examples": []},
    },
}

SAFE_VERDICT = {
    "isScam": False,
    "confidence": 0.05,
    "reasons": ["会議の連絡であり、金銭や個人情報の要求はない"],
    "riskLevel": "low",
    "details": {key: {"detected": False, "examples": []} for key in SCAM_VERDICT["details"]},
}


def verdict(**overrides):
    data = copy.deepcopy(SCAM_VERDICT)
    data.update(overrides)
    return data
