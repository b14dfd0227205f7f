"""
Таблица методов Flickr REST API

Каждая запись: (HTTP метод, полное имя метода, обязательные аргументы).
"""

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from ..types.models import MethodSpec
from ..utils.naming import normalize_method_name
from ...exc import MissingRequiredArgument, UnknownMethod

_METHODS: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    ("GET", "flickr.activity.userComments", ()),
    ("GET", "flickr.activity.userPhotos", ()),
    ("GET", "flickr.auth.checkToken", ("auth_token",)),
    ("GET", "flickr.auth.getFrob", ()),
    ("GET", "flickr.auth.getFullToken", ("mini_token",)),
    ("GET", "flickr.auth.getToken", ("frob",)),
    ("GET", "flickr.auth.oauth.checkToken", ("oauth_token",)),
    ("GET", "flickr.auth.oauth.getAccessToken", ()),
    ("GET", "flickr.blogs.getList", ()),
    ("GET", "flickr.blogs.getServices", ()),
    ("POST", "flickr.blogs.postPhoto", ("photo_id", "title", "description")),
    ("GET", "flickr.cameras.getBrandModels", ("brand",)),
    ("GET", "flickr.cameras.getBrands", ()),
    ("GET", "flickr.collections.getInfo", ("collection_id",)),
    ("GET", "flickr.collections.getTree", ()),
    ("GET", "flickr.commons.getInstitutions", ()),
    ("GET", "flickr.contacts.getList", ()),
    ("GET", "flickr.contacts.getListRecentlyUploaded", ()),
    ("GET", "flickr.contacts.getPublicList", ("user_id",)),
    ("GET", "flickr.contacts.getTaggingSuggestions", ()),
    ("POST", "flickr.favorites.add", ("photo_id",)),
    ("GET", "flickr.favorites.getContext", ("photo_id", "user_id")),
    ("GET", "flickr.favorites.getList", ()),
    ("GET", "flickr.favorites.getPublicList", ("user_id",)),
    ("POST", "flickr.favorites.remove", ("photo_id",)),
    ("POST", "flickr.galleries.addPhoto", ("gallery_id", "photo_id")),
    ("POST", "flickr.galleries.create", ("title", "description")),
    ("POST", "flickr.galleries.editMeta", ("gallery_id", "title")),
    ("POST", "flickr.galleries.editPhoto", ("gallery_id", "photo_id", "comment")),
    (
        "POST", "flickr.galleries.editPhotos",
        ("gallery_id", "primary_photo_id", "photo_ids"),
    ),
    ("GET", "flickr.galleries.getInfo", ("gallery_id",)),
    ("GET", "flickr.galleries.getList", ("user_id",)),
    ("GET", "flickr.galleries.getListForPhoto", ("photo_id",)),
    ("GET", "flickr.galleries.getPhotos", ("gallery_id",)),
    ("GET", "flickr.groups.browse", ()),
    ("GET", "flickr.groups.getInfo", ("group_id",)),
    ("POST", "flickr.groups.join", ("group_id",)),
    ("POST", "flickr.groups.joinRequest", ("group_id", "message", "accept_rules")),
    ("POST", "flickr.groups.leave", ("group_id",)),
    ("GET", "flickr.groups.search", ("text",)),
    ("POST", "flickr.groups.discuss.replies.add", ("group_id", "topic_id", "message")),
    (
        "POST", "flickr.groups.discuss.replies.delete",
        ("group_id", "topic_id", "reply_id"),
    ),
    (
        "POST", "flickr.groups.discuss.replies.edit",
        ("group_id", "topic_id", "reply_id", "message"),
    ),
    (
        "GET", "flickr.groups.discuss.replies.getInfo",
        ("group_id", "topic_id", "reply_id"),
    ),
    (
        "GET", "flickr.groups.discuss.replies.getList",
        ("group_id", "topic_id", "per_page"),
    ),
    ("POST", "flickr.groups.discuss.topics.add", ("group_id", "subject", "message")),
    ("GET", "flickr.groups.discuss.topics.getInfo", ("group_id", "topic_id")),
    ("GET", "flickr.groups.discuss.topics.getList", ("group_id",)),
    ("GET", "flickr.groups.members.getList", ("group_id",)),
    ("POST", "flickr.groups.pools.add", ("photo_id", "group_id")),
    ("GET", "flickr.groups.pools.getContext", ("photo_id", "group_id")),
    ("GET", "flickr.groups.pools.getGroups", ()),
    ("GET", "flickr.groups.pools.getPhotos", ("group_id",)),
    ("POST", "flickr.groups.pools.remove", ("photo_id", "group_id")),
    ("GET", "flickr.interestingness.getList", ()),
    ("GET", "flickr.machinetags.getNamespaces", ()),
    ("GET", "flickr.machinetags.getPairs", ()),
    ("GET", "flickr.machinetags.getPredicates", ()),
    ("GET", "flickr.machinetags.getRecentValues", ()),
    ("GET", "flickr.machinetags.getValues", ("namespace", "predicate")),
    ("GET", "flickr.panda.getList", ()),
    ("GET", "flickr.panda.getPhotos", ("panda_name",)),
    ("GET", "flickr.people.findByEmail", ("find_email",)),
    ("GET", "flickr.people.findByUsername", ("username",)),
    ("GET", "flickr.people.getGroups", ("user_id",)),
    ("GET", "flickr.people.getInfo", ("user_id",)),
    ("GET", "flickr.people.getLimits", ()),
    ("GET", "flickr.people.getPhotos", ("user_id",)),
    ("GET", "flickr.people.getPhotosOf", ("user_id",)),
    ("GET", "flickr.people.getPublicGroups", ("user_id",)),
    ("GET", "flickr.people.getPublicPhotos", ("user_id",)),
    ("GET", "flickr.people.getUploadStatus", ()),
    ("POST", "flickr.photos.addTags", ("photo_id", "tags")),
    ("POST", "flickr.photos.delete", ("photo_id",)),
    ("GET", "flickr.photos.getAllContexts", ("photo_id",)),
    ("GET", "flickr.photos.getContactsPhotos", ()),
    ("GET", "flickr.photos.getContactsPublicPhotos", ("user_id",)),
    ("GET", "flickr.photos.getContext", ("photo_id",)),
    ("GET", "flickr.photos.getCounts", ()),
    ("GET", "flickr.photos.getExif", ("photo_id",)),
    ("GET", "flickr.photos.getFavorites", ("photo_id",)),
    ("GET", "flickr.photos.getInfo", ("photo_id",)),
    ("GET", "flickr.photos.getNotInSet", ()),
    ("GET", "flickr.photos.getPerms", ("photo_id",)),
    ("GET", "flickr.photos.getPopular", ()),
    ("GET", "flickr.photos.getRecent", ()),
    ("GET", "flickr.photos.getSizes", ("photo_id",)),
    ("GET", "flickr.photos.getUntagged", ()),
    ("GET", "flickr.photos.getWithGeoData", ()),
    ("GET", "flickr.photos.getWithoutGeoData", ()),
    ("GET", "flickr.photos.recentlyUpdated", ("min_date",)),
    ("POST", "flickr.photos.removeTag", ("tag_id",)),
    ("GET", "flickr.photos.search", ()),
    ("POST", "flickr.photos.setContentType", ("photo_id", "content_type")),
    ("POST", "flickr.photos.setDates", ("photo_id",)),
    ("POST", "flickr.photos.setMeta", ("photo_id",)),
    (
        "POST", "flickr.photos.setPerms",
        ("photo_id", "is_public", "is_friend", "is_family"),
    ),
    ("POST", "flickr.photos.setSafetyLevel", ("photo_id",)),
    ("POST", "flickr.photos.setTags", ("photo_id", "tags")),
    ("POST", "flickr.photos.comments.addComment", ("photo_id", "comment_text")),
    ("POST", "flickr.photos.comments.deleteComment", ("comment_id",)),
    ("POST", "flickr.photos.comments.editComment", ("comment_id", "comment_text")),
    ("GET", "flickr.photos.comments.getList", ("photo_id",)),
    ("GET", "flickr.photos.comments.getRecentForContacts", ()),
    ("POST", "flickr.photos.geo.batchCorrectLocation", ("lat", "lon", "accuracy")),
    ("POST", "flickr.photos.geo.correctLocation", ("photo_id", "foursquare_id")),
    ("GET", "flickr.photos.geo.getLocation", ("photo_id",)),
    ("GET", "flickr.photos.geo.getPerms", ("photo_id",)),
    ("GET", "flickr.photos.geo.photosForLocation", ("lat", "lon")),
    ("POST", "flickr.photos.geo.removeLocation", ("photo_id",)),
    ("POST", "flickr.photos.geo.setContext", ("photo_id", "context")),
    ("POST", "flickr.photos.geo.setLocation", ("photo_id", "lat", "lon")),
    (
        "POST", "flickr.photos.geo.setPerms",
        ("is_public", "is_contact", "is_friend", "is_family", "photo_id"),
    ),
    ("GET", "flickr.photos.licenses.getInfo", ()),
    ("POST", "flickr.photos.licenses.setLicense", ("photo_id", "license_id")),
    (
        "POST", "flickr.photos.notes.add",
        ("photo_id", "note_x", "note_y", "note_w", "note_h", "note_text"),
    ),
    ("POST", "flickr.photos.notes.delete", ("note_id",)),
    (
        "POST", "flickr.photos.notes.edit",
        ("note_id", "note_x", "note_y", "note_w", "note_h", "note_text"),
    ),
    ("POST", "flickr.photos.people.add", ("photo_id", "user_id")),
    ("POST", "flickr.photos.people.delete", ("photo_id", "user_id")),
    ("POST", "flickr.photos.people.deleteCoords", ("photo_id", "user_id")),
    (
        "POST", "flickr.photos.people.editCoords",
        ("photo_id", "user_id", "person_x", "person_y", "person_w", "person_h"),
    ),
    ("GET", "flickr.photos.people.getList", ("photo_id",)),
    ("POST", "flickr.photos.suggestions.approveSuggestion", ("suggestion_id",)),
    ("GET", "flickr.photos.suggestions.getList", ()),
    ("POST", "flickr.photos.suggestions.rejectSuggestion", ("suggestion_id",)),
    ("POST", "flickr.photos.suggestions.removeSuggestion", ("suggestion_id",)),
    ("POST", "flickr.photos.suggestions.suggestLocation", ("photo_id", "lat", "lon")),
    ("POST", "flickr.photos.transform.rotate", ("photo_id", "degrees")),
    ("GET", "flickr.photos.upload.checkTickets", ("tickets",)),
    ("POST", "flickr.photosets.addPhoto", ("photoset_id", "photo_id")),
    ("POST", "flickr.photosets.create", ("title", "primary_photo_id")),
    ("POST", "flickr.photosets.delete", ("photoset_id",)),
    ("POST", "flickr.photosets.editMeta", ("photoset_id", "title")),
    (
        "POST", "flickr.photosets.editPhotos",
        ("photoset_id", "primary_photo_id", "photo_ids"),
    ),
    ("GET", "flickr.photosets.getContext", ("photo_id", "photoset_id")),
    ("GET", "flickr.photosets.getInfo", ("photoset_id", "user_id")),
    ("GET", "flickr.photosets.getList", ()),
    ("GET", "flickr.photosets.getPhotos", ("photoset_id", "user_id")),
    ("POST", "flickr.photosets.orderSets", ("photoset_ids",)),
    ("POST", "flickr.photosets.removePhoto", ("photoset_id", "photo_id")),
    ("POST", "flickr.photosets.removePhotos", ("photoset_id", "photo_ids")),
    ("POST", "flickr.photosets.reorderPhotos", ("photoset_id", "photo_ids")),
    ("POST", "flickr.photosets.setPrimaryPhoto", ("photoset_id", "photo_id")),
    ("POST", "flickr.photosets.comments.addComment", ("photoset_id", "comment_text")),
    ("POST", "flickr.photosets.comments.deleteComment", ("comment_id",)),
    ("POST", "flickr.photosets.comments.editComment", ("comment_id", "comment_text")),
    ("GET", "flickr.photosets.comments.getList", ("photoset_id",)),
    ("GET", "flickr.places.find", ("query",)),
    ("GET", "flickr.places.findByLatLon", ("lat", "lon")),
    ("GET", "flickr.places.getChildrenWithPhotosPublic", ()),
    ("GET", "flickr.places.getInfo", ()),
    ("GET", "flickr.places.getInfoByUrl", ("url",)),
    ("GET", "flickr.places.getPlaceTypes", ()),
    ("GET", "flickr.places.getShapeHistory", ()),
    ("GET", "flickr.places.getTopPlacesList", ("place_type_id",)),
    ("GET", "flickr.places.placesForBoundingBox", ("bbox",)),
    ("GET", "flickr.places.placesForContacts", ()),
    ("GET", "flickr.places.placesForTags", ("place_type_id",)),
    ("GET", "flickr.places.placesForUser", ()),
    ("GET", "flickr.places.resolvePlaceId", ("place_id",)),
    ("GET", "flickr.places.resolvePlaceURL", ("url",)),
    ("GET", "flickr.places.tagsForPlace", ()),
    ("GET", "flickr.prefs.getContentType", ()),
    ("GET", "flickr.prefs.getGeoPerms", ()),
    ("GET", "flickr.prefs.getHidden", ()),
    ("GET", "flickr.prefs.getPrivacy", ()),
    ("GET", "flickr.prefs.getSafetyLevel", ()),
    ("GET", "flickr.profile.getProfile", ("user_id",)),
    ("GET", "flickr.push.getSubscriptions", ()),
    ("GET", "flickr.push.getTopics", ()),
    ("GET", "flickr.push.subscribe", ("topic", "callback", "verify")),
    ("GET", "flickr.push.unsubscribe", ("topic", "callback", "verify")),
    ("GET", "flickr.reflection.getMethodInfo", ("method_name",)),
    ("GET", "flickr.reflection.getMethods", ()),
    ("GET", "flickr.stats.getCSVFiles", ()),
    ("GET", "flickr.stats.getCollectionDomains", ("date",)),
    ("GET", "flickr.stats.getCollectionReferrers", ("date", "domain")),
    ("GET", "flickr.stats.getCollectionStats", ("date", "collection_id")),
    ("GET", "flickr.stats.getPhotoDomains", ("date",)),
    ("GET", "flickr.stats.getPhotoReferrers", ("date", "domain")),
    ("GET", "flickr.stats.getPhotoStats", ("date", "photo_id")),
    ("GET", "flickr.stats.getPhotosetDomains", ("date",)),
    ("GET", "flickr.stats.getPhotosetReferrers", ("date", "domain")),
    ("GET", "flickr.stats.getPhotosetStats", ("date", "photoset_id")),
    ("GET", "flickr.stats.getPhotostreamDomains", ("date",)),
    ("GET", "flickr.stats.getPhotostreamReferrers", ("date", "domain")),
    ("GET", "flickr.stats.getPhotostreamStats", ("date",)),
    ("GET", "flickr.stats.getPopularPhotos", ()),
    ("GET", "flickr.stats.getTotalViews", ()),
    ("GET", "flickr.tags.getClusterPhotos", ("tag", "cluster_id")),
    ("GET", "flickr.tags.getClusters", ("tag",)),
    ("GET", "flickr.tags.getHotList", ()),
    ("GET", "flickr.tags.getListPhoto", ("photo_id",)),
    ("GET", "flickr.tags.getListUser", ()),
    ("GET", "flickr.tags.getListUserPopular", ()),
    ("GET", "flickr.tags.getListUserRaw", ()),
    ("GET", "flickr.tags.getMostFrequentlyUsed", ()),
    ("GET", "flickr.tags.getRelated", ("tag",)),
    ("GET", "flickr.test.echo", ()),
    ("GET", "flickr.test.login", ()),
    ("GET", "flickr.test.null", ()),
    ("POST", "flickr.testimonials.addTestimonial", ("user_id", "testimonial_text")),
    ("POST", "flickr.testimonials.approveTestimonial", ("testimonial_id",)),
    ("POST", "flickr.testimonials.deleteTestimonial", ("testimonial_id",)),
    (
        "POST", "flickr.testimonials.editTestimonial",
        ("user_id", "testimonial_id", "testimonial_text"),
    ),
    ("GET", "flickr.testimonials.getAllTestimonialsAbout", ()),
    ("GET", "flickr.testimonials.getAllTestimonialsAboutBy", ("user_id",)),
    ("GET", "flickr.testimonials.getAllTestimonialsBy", ()),
    ("GET", "flickr.testimonials.getPendingTestimonialsAbout", ()),
    ("GET", "flickr.testimonials.getPendingTestimonialsAboutBy", ("user_id",)),
    ("GET", "flickr.testimonials.getPendingTestimonialsBy", ()),
    ("GET", "flickr.testimonials.getTestimonialsAbout", ("user_id",)),
    ("GET", "flickr.testimonials.getTestimonialsAboutBy", ("user_id",)),
    ("GET", "flickr.testimonials.getTestimonialsBy", ("user_id",)),
    ("GET", "flickr.urls.getGroup", ("group_id",)),
    ("GET", "flickr.urls.getUserPhotos", ()),
    ("GET", "flickr.urls.getUserProfile", ()),
    ("GET", "flickr.urls.lookupGallery", ("url",)),
    ("GET", "flickr.urls.lookupGroup", ("url",)),
    ("GET", "flickr.urls.lookupUser", ("url",)),
)

METHODS: Dict[str, MethodSpec] = {
    name: MethodSpec(name=name, verb=verb, required=required)
    for verb, name, required in _METHODS
}

# Нормализованное имя -> каноническое (flickr.photos.get_info -> flickr.photos.getInfo)
_ALIASES: Dict[str, str] = {normalize_method_name(name): name for name in METHODS}


def lookup(name: str) -> Optional[MethodSpec]:
    """Поиск метода по каноническому имени или его snake_case варианту"""
    spec = METHODS.get(name)
    if spec is None:
        canonical = _ALIASES.get(normalize_method_name(name))
        spec = METHODS.get(canonical) if canonical else None
    return spec


def get_method(name: str) -> MethodSpec:
    """Как lookup(), но с исключением для неизвестного метода"""
    spec = lookup(name)
    if spec is None:
        raise UnknownMethod(name)
    return spec


def iter_methods(prefix: str = "") -> Iterator[MethodSpec]:
    """Методы в порядке таблицы, опционально только с заданным префиксом"""
    for spec in METHODS.values():
        if spec.name.startswith(prefix):
            yield spec


def validate(args: Optional[Mapping[str, Any]], required: Iterable[str]) -> None:
    """
    Проверка наличия обязательных аргументов.

    Отсутствующий ключ и значение None считаются одинаково: аргумент не передан.
    Сообщается о первом отсутствующем аргументе в порядке таблицы.

    Raises:
        MissingRequiredArgument: если хотя бы один аргумент не передан
    """
    args = args or {}
    for name in required:
        if args.get(name) is None:
            raise MissingRequiredArgument(name)
