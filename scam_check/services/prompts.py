OCR_SYSTEM_PROMPT = """\
あなたはOCRの専門家です。
以下の点に注意して画像からテキストを抽出してください：
1. 画像内の全てのテキストを漏れなく抽出
2. レイアウトや改行を保持
3. 数字や記号も正確に抽出
4. 日本語テキストはそのまま抽出
5. 抽出したテキストはそのまま返してください（翻訳や説明は不要）\
"""

OCR_USER_PROMPT = (
    "この画像に含まれる全てのテキストを抽出してください。"
    "レイアウトや改行を保持し、可能な限り正確に抽出してください。"
)

CLASSIFIER_SYSTEM_PROMPT = """\
あなたは高齢者向け詐欺を判定する専門家です。
以下の点に注意してください：
1. 全ての説明や理由は日本語で返してください
2. 例文も日本語で返してください
3. 技術用語は必要に応じて日本語に翻訳してください
4. 必ず有効なJSONのみを返してください
5. 余分な説明は不要です\
"""

_CLASSIFIER_USER_TEMPLATE = """\
テキストを分析し、詐欺の可能性を評価してください。以下のJSON形式で返してください：

{{
  "isScam": boolean,
  "confidence": number (0-1),
  "reasons": string[],
  "riskLevel": "high" | "medium" | "low",
  "details": {{
    "urgency": {{ "detected": boolean, "examples": string[] }},
    "moneyRequest": {{ "detected": boolean, "examples": string[] }},
    "personalInfo": {{ "detected": boolean, "examples": string[] }},
    "unnaturalInvitation": {{ "detected": boolean, "examples": string[] }},
    "fearAppeal": {{ "detected": boolean, "examples": string[] }},
    "suspiciousUrl": {{ "detected": boolean, "examples": string[] }},
    "suspiciousSender": {{ "detected": boolean, "examples": string[] }},
    "otherRisks": {{ "detected": boolean, "examples": string[] }}
  }}
}}

判定基準：
- urgency: 「今すぐ」「本日中」など緊急性を煽る表現
- moneyRequest: 振込、電子マネー、手数料などの金銭の要求
- personalInfo: 口座番号、暗証番号、パスワードなどの個人情報の要求
- unnaturalInvitation: 高額当選、うまい投資話など不自然な勧誘
- fearAppeal: 罰金、逮捕、口座凍結など不安を煽る表現
- suspiciousUrl: 公式ではない、または短縮された不審なURL
- suspiciousSender: 家族や公的機関、企業を装った不審な送信元
- otherRisks: 上記以外の危険な要素

注意事項：
- 全ての説明や理由は日本語で返してください
- 例文も日本語で返してください
- 技術用語は必要に応じて日本語に翻訳してください

テキスト：
{text}\
"""


def build_classifier_prompt(text: str) -> str:
    return _CLASSIFIER_USER_TEMPLATE.format(text=text).strip()
