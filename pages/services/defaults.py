# pages/services/defaults.py

"""Initial home page blocks, used the first time HomeContent is read."""

DEFAULT_HERO = {
    "badge": "کلکسیون پاییزه",
    "title": "خانه‌ای گرم‌تر با انتخاب‌های دقیق‌تر",
    "subtitle": "لوازم آشپزخانه، روشنایی، منسوجات و دکوراسیون با ارسال سریع به سراسر کشور.",
    "primary_cta": {"label": "مشاهده محصولات", "href": "/products"},
    "secondary_cta": {"label": "پیشنهادهای ویژه", "href": "/products?on_sale=true"},
    "stats": [
        {"id": "products", "label": "محصول فعال", "value": "+۱۲۰۰"},
        {"id": "customers", "label": "مشتری راضی", "value": "+۳۵هزار"},
        {"id": "delivery", "label": "ارسال در تهران", "value": "۲۴ ساعته"},
    ],
    "image": "",
}

DEFAULT_HOME_CONTENT = {
    "hero": DEFAULT_HERO,
    "hero_slides": [DEFAULT_HERO],
    "spotlights": [
        {
            "id": "kitchen",
            "title": "آشپزخانه",
            "description": "ظروف چدنی، قابلمه و ابزار پخت",
            "href": "/categories/kitchen",
            "accent": "amber",
        },
        {
            "id": "lighting",
            "title": "روشنایی",
            "description": "چراغ مطالعه، آویز و نور محیطی",
            "href": "/categories/lighting",
            "accent": "sky",
        },
    ],
    "trust_signals": [
        {"id": "warranty", "title": "ضمانت اصالت", "description": "همه کالاها با گارانتی معتبر", "icon": "shield"},
        {"id": "return", "title": "۷ روز بازگشت", "description": "بازگشت کالا بدون پرسش", "icon": "refresh"},
        {"id": "support", "title": "پشتیبانی", "description": "پاسخگویی هر روز هفته", "icon": "headset"},
    ],
    "testimonials": [
        {
            "id": "t1",
            "name": "نگار",
            "handle": "@negar.home",
            "text": "بسته‌بندی عالی بود و فرش دقیقاً مثل عکس‌ها بود.",
            "avatar": "",
            "highlight": True,
        },
    ],
}
