import pytest


@pytest.fixture
def result_payload() -> dict:
    return {
        "titles": ["عنوان 1", "عنوان 2", "عنوان 3", "عنوان 4", "عنوان 5"],
        "description": "سطر الخطاف\nسطر ثاني\n\nسؤال الحلقة: ما رأيك؟\n\nفواصل زمنية:\n00:00 المقدمة",
        "keywords": ["هواتف", "ألعاب", "مراجعة"],
        "hashtags": ["#هواتف", "#ألعاب"],
        "category": "Tech",
        "algorithmStrategy": "عناوين فضولية ترفع نسبة النقر.",
        "thumbnailIdeas": [
            {"description": "وجه مندهش", "text": "لن تصدق"},
            {"description": "مقارنة هاتفين", "text": "الأفضل؟"},
            {"description": "سهم أحمر", "text": "السر هنا"},
        ],
    }
