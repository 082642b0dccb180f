"""Translated titles and descriptions for the site's static pages."""

from typing import Dict, Optional, Union

from app.models.locale import Locale, LocaleCatalog
from app.models.seo import PageSeo, SeoText
from app.services.locales import default_catalog

FALLBACK_PAGE = "home"

# Separator between a page title and the brand in every title template
BRAND_SEPARATOR = " | "

TITLE_TEMPLATES: Dict[Locale, str] = {
    Locale.KA: "%s | პარაგლაიდინგი საქართველოში",
    Locale.EN: "%s | Paragliding Georgia",
    Locale.RU: "%s | Параглайдинг в Грузии",
    Locale.AR: "%s | الطيران المظلي في جورجيا",
    Locale.DE: "%s | Gleitschirmfliegen Georgien",
    Locale.TR: "%s | Gürcistan Yamaç Paraşütü",
}

DEFAULT_DESCRIPTIONS: Dict[Locale, str] = {
    Locale.KA: "საქართველოში პარაგლაიდინგის საუკეთესო ადგილები. დაჯავშნე ტანდემ ფრენა გუდაურში, კაზბეგში და სხვა ლოკაციებზე.",
    Locale.EN: "Best paragliding locations in Georgia. Book tandem flights in Gudauri, Kazbegi and other stunning locations.",
    Locale.RU: "Лучшие места для параглайдинга в Грузии. Забронируйте тандемный полет в Гудаури, Казбеги и других локациях.",
    Locale.AR: "أفضل مواقع الطيران المظلي في جورجيا. احجز رحلات ترادفية في غودوري وكازبيغي ومواقع أخرى مذهلة.",
    Locale.DE: "Die besten Gleitschirmflug-Standorte in Georgien. Buchen Sie Tandemflüge in Gudauri, Kazbegi und anderen Orten.",
    Locale.TR: "Gürcistan'daki en iyi yamaç paraşütü lokasyonları. Gudauri, Kazbegi ve diğer muhteşem lokasyonlarda tandem uçuş rezervasyonu yapın.",
}

PAGE_SEO: Dict[str, PageSeo] = {
    "home": PageSeo(
        title={
            Locale.KA: "პარაგლაიდინგი საქართველოში - ტანდემ ფრენები",
            Locale.EN: "Paragliding in Georgia - Tandem Flights",
            Locale.RU: "Параглайдинг в Грузии - Тандемные полеты",
            Locale.AR: "الطيران المظلي في جورجيا - رحلات ترادفية",
            Locale.DE: "Gleitschirmfliegen in Georgien - Tandemflüge",
            Locale.TR: "Gürcistan'da Yamaç Paraşütü - Tandem Uçuşlar",
        },
        description=DEFAULT_DESCRIPTIONS,
    ),
    "about": PageSeo(
        title={
            Locale.KA: "ჩვენ შესახებ",
            Locale.EN: "About Us",
            Locale.RU: "О нас",
            Locale.AR: "معلومات عنا",
            Locale.DE: "Über uns",
            Locale.TR: "Hakkımızda",
        },
        description={
            Locale.KA: "გაიცანით Paragliding Georgia - საქართველოში პარაგლაიდინგის პროფესიონალური გუნდი",
            Locale.EN: "Meet Paragliding Georgia - Professional paragliding team in Georgia",
            Locale.RU: "Познакомьтесь с Paragliding Georgia - Профессиональная команда параглайдинга в Грузии",
            Locale.AR: "تعرف على Paragliding Georgia - فريق الطيران المظلي المحترف في جورجيا",
            Locale.DE: "Lernen Sie Paragliding Georgia kennen - Professionelles Gleitschirmteam in Georgien",
            Locale.TR: "Paragliding Georgia ile tanışın - Gürcistan'da profesyonel yamaç paraşütü ekibi",
        },
    ),
    "contact": PageSeo(
        title={
            Locale.KA: "კონტაქტი",
            Locale.EN: "Contact Us",
            Locale.RU: "Контакты",
            Locale.AR: "اتصل بنا",
            Locale.DE: "Kontakt",
            Locale.TR: "İletişim",
        },
        description={
            Locale.KA: "დაგვიკავშირდით - Paragliding Georgia. ტანდემ ფრენის დაჯავშნა და კონსულტაცია",
            Locale.EN: "Contact Paragliding Georgia. Book tandem flights and get consultation",
            Locale.RU: "Свяжитесь с Paragliding Georgia. Бронирование тандемных полетов и консультация",
            Locale.AR: "اتصل بـ Paragliding Georgia. حجز رحلات ترادفية والحصول على استشارة",
            Locale.DE: "Kontaktieren Sie Paragliding Georgia. Tandemflüge buchen und Beratung erhalten",
            Locale.TR: "Paragliding Georgia ile iletişime geçin. Tandem uçuş rezervasyonu ve danışmanlık",
        },
    ),
    "promotions": PageSeo(
        title={
            Locale.KA: "აქციები და შეთავაზებები",
            Locale.EN: "Promotions & Offers",
            Locale.RU: "Акции и предложения",
            Locale.AR: "العروض والترويج",
            Locale.DE: "Angebote & Aktionen",
            Locale.TR: "Promosyonlar ve Teklifler",
        },
        description={
            Locale.KA: "პარაგლაიდინგის აქციები და სპეციალური შეთავაზებები საქართველოში",
            Locale.EN: "Paragliding promotions and special offers in Georgia",
            Locale.RU: "Акции и специальные предложения на параглайдинг в Грузии",
            Locale.AR: "عروض وخصومات خاصة على الطيران المظلي في جورجيا",
            Locale.DE: "Gleitschirmflug-Angebote und Sonderaktionen in Georgien",
            Locale.TR: "Gürcistan'da yamaç paraşütü promosyonları ve özel teklifler",
        },
    ),
    "locations": PageSeo(
        title={
            Locale.KA: "პარაგლაიდინგის ლოკაციები",
            Locale.EN: "Paragliding Locations",
            Locale.RU: "Локации для параглайдинга",
            Locale.AR: "مواقع الطيران المظلي",
            Locale.DE: "Gleitschirmflug-Standorte",
            Locale.TR: "Yamaç Paraşütü Lokasyonları",
        },
        description={
            Locale.KA: "აღმოაჩინე საქართველოში პარაგლაიდინგის საუკეთესო ადგილები - გუდაური, კაზბეგი და სხვა",
            Locale.EN: "Discover the best paragliding spots in Georgia - Gudauri, Kazbegi and more",
            Locale.RU: "Откройте лучшие места для параглайдинга в Грузии - Гудаури, Казбеги и другие",
            Locale.AR: "اكتشف أفضل مواقع الطيران المظلي في جورجيا - غودوري، كازبيغي والمزيد",
            Locale.DE: "Entdecken Sie die besten Gleitschirmflug-Spots in Georgien - Gudauri, Kazbegi und mehr",
            Locale.TR: "Gürcistan'ın en iyi yamaç paraşütü noktalarını keşfedin - Gudauri, Kazbegi ve daha fazlası",
        },
    ),
    "terms": PageSeo(
        title={
            Locale.KA: "წესები და პირობები",
            Locale.EN: "Terms & Conditions",
            Locale.RU: "Условия использования",
            Locale.AR: "الشروط والأحكام",
            Locale.DE: "Nutzungsbedingungen",
            Locale.TR: "Şartlar ve Koşullar",
        },
        description={
            Locale.KA: "Paragliding Georgia-ს გამოყენების წესები და პირობები",
            Locale.EN: "Terms and conditions of using Paragliding Georgia",
            Locale.RU: "Условия использования сервиса Paragliding Georgia",
            Locale.AR: "شروط وأحكام استخدام Paragliding Georgia",
            Locale.DE: "Nutzungsbedingungen von Paragliding Georgia",
            Locale.TR: "Paragliding Georgia kullanım şartları ve koşulları",
        },
    ),
    "privacy": PageSeo(
        title={
            Locale.KA: "კონფიდენციალურობის პოლიტიკა",
            Locale.EN: "Privacy Policy",
            Locale.RU: "Политика конфиденциальности",
            Locale.AR: "سياسة الخصوصية",
            Locale.DE: "Datenschutzrichtlinie",
            Locale.TR: "Gizlilik Politikası",
        },
        description={
            Locale.KA: "Paragliding Georgia-ს კონფიდენციალურობის პოლიტიკა და მონაცემთა დაცვა",
            Locale.EN: "Privacy policy and data protection of Paragliding Georgia",
            Locale.RU: "Политика конфиденциальности и защита данных Paragliding Georgia",
            Locale.AR: "سياسة الخصوصية وحماية البيانات لـ Paragliding Georgia",
            Locale.DE: "Datenschutzrichtlinie und Datenschutz von Paragliding Georgia",
            Locale.TR: "Paragliding Georgia gizlilik politikası ve veri koruma",
        },
    ),
    "login": PageSeo(
        title={
            Locale.KA: "შესვლა",
            Locale.EN: "Login",
            Locale.RU: "Вход",
            Locale.AR: "تسجيل الدخول",
            Locale.DE: "Anmelden",
            Locale.TR: "Giriş",
        },
        description={
            Locale.KA: "შედით თქვენს ანგარიშზე",
            Locale.EN: "Sign in to your account",
            Locale.RU: "Войдите в свой аккаунт",
            Locale.AR: "تسجيل الدخول إلى حسابك",
            Locale.DE: "Melden Sie sich bei Ihrem Konto an",
            Locale.TR: "Hesabınıza giriş yapın",
        },
    ),
    "register": PageSeo(
        title={
            Locale.KA: "რეგისტრაცია",
            Locale.EN: "Register",
            Locale.RU: "Регистрация",
            Locale.AR: "التسجيل",
            Locale.DE: "Registrieren",
            Locale.TR: "Kayıt Ol",
        },
        description={
            Locale.KA: "შექმენით ახალი ანგარიში Paragliding Georgia-ზე",
            Locale.EN: "Create a new account on Paragliding Georgia",
            Locale.RU: "Создайте новый аккаунт на Paragliding Georgia",
            Locale.AR: "إنشاء حساب جديد على Paragliding Georgia",
            Locale.DE: "Erstellen Sie ein neues Konto bei Paragliding Georgia",
            Locale.TR: "Paragliding Georgia'da yeni bir hesap oluşturun",
        },
    ),
    "profile": PageSeo(
        title={
            Locale.KA: "პროფილი",
            Locale.EN: "Profile",
            Locale.RU: "Профиль",
            Locale.AR: "الملف الشخصي",
            Locale.DE: "Profil",
            Locale.TR: "Profil",
        },
        description={
            Locale.KA: "თქვენი პროფილის მართვა",
            Locale.EN: "Manage your profile",
            Locale.RU: "Управление профилем",
            Locale.AR: "إدارة ملفك الشخصي",
            Locale.DE: "Profilverwaltung",
            Locale.TR: "Profilinizi yönetin",
        },
    ),
    "bookings": PageSeo(
        title={
            Locale.KA: "ჩემი ჯავშნები",
            Locale.EN: "My Bookings",
            Locale.RU: "Мои бронирования",
            Locale.AR: "حجوزاتي",
            Locale.DE: "Meine Buchungen",
            Locale.TR: "Rezervasyonlarım",
        },
        description={
            Locale.KA: "თქვენი ჯავშნების მართვა",
            Locale.EN: "Manage your bookings",
            Locale.RU: "Управление бронированиями",
            Locale.AR: "إدارة حجوزاتك",
            Locale.DE: "Buchungen verwalten",
            Locale.TR: "Rezervasyonlarınızı yönetin",
        },
    ),
    "notifications": PageSeo(
        title={
            Locale.KA: "შეტყობინებები",
            Locale.EN: "Notifications",
            Locale.RU: "Уведомления",
            Locale.AR: "الإشعارات",
            Locale.DE: "Benachrichtigungen",
            Locale.TR: "Bildirimler",
        },
        description={
            Locale.KA: "თქვენი შეტყობინებები",
            Locale.EN: "Your notifications",
            Locale.RU: "Ваши уведомления",
            Locale.AR: "إشعاراتك",
            Locale.DE: "Ihre Benachrichtigungen",
            Locale.TR: "Bildirimleriniz",
        },
    ),
}

# URL path of each page key; "home" is the locale root.
PAGE_PATHS: Dict[str, str] = {key: "" if key == FALLBACK_PAGE else key for key in PAGE_SEO}


def _pick(
    translations: Optional[Dict[Locale, str]], locale: Locale, default: Locale
) -> Optional[str]:
    if not translations:
        return None
    return translations.get(locale) or translations.get(default)


def get_page_seo(
    page_key: str,
    locale: Union[Locale, str, None],
    catalog: Optional[LocaleCatalog] = None,
) -> SeoText:
    """Return the title and description of *page_key* in *locale*.

    A missing translation falls back to the default locale, an unsupported
    locale is treated as the default one, and an unknown page key yields the
    home page's text.
    """
    catalog = catalog or default_catalog()
    resolved = catalog.resolve(locale)
    seo = PAGE_SEO.get(page_key) or PAGE_SEO[FALLBACK_PAGE]
    return SeoText(
        title=_pick(seo.title, resolved, catalog.default) or "",
        description=_pick(seo.description, resolved, catalog.default) or "",
    )


def get_page_og(
    page_key: str,
    locale: Union[Locale, str, None],
    catalog: Optional[LocaleCatalog] = None,
) -> SeoText:
    """Open Graph title/description, preferring the OG overrides when present."""
    catalog = catalog or default_catalog()
    resolved = catalog.resolve(locale)
    seo = PAGE_SEO.get(page_key)
    if seo is None:
        return get_page_seo(FALLBACK_PAGE, resolved, catalog)

    plain = get_page_seo(page_key, resolved, catalog)
    return SeoText(
        title=(seo.og_title or {}).get(resolved) or plain.title,
        description=(seo.og_description or {}).get(resolved) or plain.description,
    )


def format_title(
    title: str,
    locale: Union[Locale, str, None],
    catalog: Optional[LocaleCatalog] = None,
) -> str:
    """Apply the locale's ``"%s | <brand>"`` title template.

    A title that already carries a brand suffix (entity fallbacks such as
    ``"Gudauri - Georgia | Paragliding"``) is returned unchanged.
    """
    if BRAND_SEPARATOR in title:
        return title
    resolved = (catalog or default_catalog()).resolve(locale)
    return TITLE_TEMPLATES[resolved] % title
