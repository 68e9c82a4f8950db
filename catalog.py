# Topic catalog and the Hebrew feedback strings shown after each answer.

TOPICS = [
    {
        "id": "arithmetic",
        "name": "ארבע פעולות חשבון",
        "description": "חיבור, חיסור, כפל וחילוק",
        "icon": "🧮",
    },
    {
        "id": "distribution",
        "name": "כפל באמצעות פילוג",
        "description": "כפל מספרים דו-ספרתיים עד 200",
        "icon": "✂️",
    },
    {
        "id": "triangles",
        "name": "מיון משולשים",
        "description": "סיווג לפי זוויות וצלעות",
        "icon": "📐",
    },
    {
        "id": "orderOfOps",
        "name": "סדר פעולות חשבון",
        "description": "סוגריים, כפל וחילוק לפני חיבור וחיסור",
        "icon": "📋",
    },
    {
        "id": "decimalStructure",
        "name": "המבנה העשרוני",
        "description": "אלפים, מאות, עשרות ויחידות עד 10,000",
        "icon": "🔢",
    },
    {
        "id": "verticalMath",
        "name": "חיבור וחיסור במאונך",
        "description": "תרגילים במאונך ובמאוזן עם ובלי המרה",
        "icon": "📝",
    },
]

ENCOURAGEMENTS = [
    "!מעולה",
    "!כל הכבוד",
    "!יופי",
    "!נכון מאוד",
    "!אלוף",
    "!בדיוק",
    "!מדהים",
]

WRONG_MESSAGES = [
    "לא נורא, ננסה שוב!",
    "כמעט! בוא נראה את הפתרון",
    "קרוב! הנה ההסבר",
]
