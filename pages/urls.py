from django.urls import path

from . import views

app_name = "pages"

urlpatterns = [
    path('', views.home, name='home'),
    path('contact/', views.contact, name='contact'),
    path('about/', views.about, name='about'),
    path('blog/<slug:slug>/', views.post, name='post'),
]
